from portfolio.models.project import Project
from portfolio.services.crud_service import update_record, delete_record, get_record

PROJECT = {"title": "X", "description": "Y", "image": "u", "technologies": ["React", "Node"]}


def create_project(client, auth_headers, **overrides):
    response = client.post("/api/admin/projects", headers=auth_headers, json={**PROJECT, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_project_then_listed(client, auth_headers):
    """Test : le projet créé apparaît dans la liste publique, featured=False par défaut"""
    created = create_project(client, auth_headers)
    assert created["technologies"] == ["React", "Node"]
    assert created["featured"] is False
    assert created["liveUrl"] is None
    assert "createdAt" in created

    response = client.get("/api/projects")
    assert response.status_code == 200
    listed = [p for p in response.json() if p["id"] == created["id"]]
    assert len(listed) == 1
    assert listed[0]["technologies"] == ["React", "Node"]
    assert listed[0]["featured"] is False


def test_create_project_accepts_snake_and_camel_case(client, auth_headers):
    data = create_project(client, auth_headers, liveUrl="https://live.demo", github_url="https://github.com/x")
    assert data["liveUrl"] == "https://live.demo"
    assert data["githubUrl"] == "https://github.com/x"


def test_create_project_with_comma_separated_technologies(client, auth_headers):
    data = create_project(client, auth_headers, technologies="Vue, Express")
    assert data["technologies"] == ["Vue", "Express"]


def test_projects_are_listed_newest_first(client, auth_headers):
    first = create_project(client, auth_headers, title="First")
    second = create_project(client, auth_headers, title="Second")
    ids = [p["id"] for p in client.get("/api/projects").json()]
    assert ids == [second["id"], first["id"]]


def test_get_single_project(client, auth_headers):
    created = create_project(client, auth_headers)
    assert client.get(f"/api/projects/{created['id']}").json()["title"] == "X"

    missing = client.get("/api/projects/9999")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Project not found"}


def test_create_project_missing_fields(client, auth_headers):
    """Test : champs requis absents -> 400 avec détail par champ"""
    response = client.post("/api/admin/projects", headers=auth_headers, json={"title": "Only title"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    fields = {d["field"] for d in body["details"]}
    assert {"description", "image", "technologies"} <= fields
    assert client.get("/api/projects").json() == []


def test_create_project_rejects_empty_title_and_unknown_fields(client, auth_headers):
    empty = client.post("/api/admin/projects", headers=auth_headers, json={**PROJECT, "title": "   "})
    assert empty.status_code == 400

    unknown = client.post("/api/admin/projects", headers=auth_headers, json={**PROJECT, "id": 42})
    assert unknown.status_code == 400


def test_partial_update_changes_only_given_field(client, auth_headers):
    """Test : update(id, {field: v}) ne touche pas aux autres champs"""
    created = create_project(client, auth_headers, liveUrl="https://live.demo")

    response = client.patch(f"/api/admin/projects/{created['id']}", headers=auth_headers, json={"featured": True})
    assert response.status_code == 200
    updated = response.json()
    assert updated["featured"] is True
    for field in ("title", "description", "image", "technologies", "liveUrl", "githubUrl", "createdAt", "id"):
        assert updated[field] == created[field]


def test_update_nullable_and_required_fields(client, auth_headers):
    created = create_project(client, auth_headers, liveUrl="https://live.demo")

    cleared = client.patch(f"/api/admin/projects/{created['id']}", headers=auth_headers, json={"liveUrl": None})
    assert cleared.status_code == 200
    assert cleared.json()["liveUrl"] is None

    refused = client.patch(f"/api/admin/projects/{created['id']}", headers=auth_headers, json={"title": None})
    assert refused.status_code == 400


def test_update_technologies_keeps_order(client, auth_headers):
    created = create_project(client, auth_headers)
    response = client.patch(
        f"/api/admin/projects/{created['id']}",
        headers=auth_headers,
        json={"technologies": ["Zig", "Ada", "Zig"]},
    )
    assert response.json()["technologies"] == ["Zig", "Ada", "Zig"]


def test_update_missing_project(client, auth_headers):
    response = client.patch("/api/admin/projects/9999", headers=auth_headers, json={"title": "New"})
    assert response.status_code == 404


def test_delete_project_is_idempotent(client, auth_headers):
    """Test : supprimer deux fois le même id ne lève pas d'erreur"""
    created = create_project(client, auth_headers)

    first = client.delete(f"/api/admin/projects/{created['id']}", headers=auth_headers)
    second = client.delete(f"/api/admin/projects/{created['id']}", headers=auth_headers)
    assert first.status_code == second.status_code == 204
    assert client.get("/api/projects").json() == []


def test_crud_service_directly(db):
    project = Project(title="A", description="B", image="c", technologies=[])
    db.add(project)
    db.commit()

    project_id = project.id

    merged = update_record(db, Project, project_id, {"title": "A2", "id": 999})
    assert merged.id == project_id
    assert merged.title == "A2"
    assert merged.description == "B"

    assert delete_record(db, Project, project_id) is True
    assert delete_record(db, Project, project_id) is False
    assert get_record(db, Project, project_id) is None
