"""Education service"""

from sqlalchemy.orm import Session
from typing import Any, Dict

from portfolio.core.errors import InvalidDataError
from portfolio.models.education import Education
from portfolio.services.crud_service import get_record_or_404, update_record


def update_education(db: Session, education_id: int, data: Dict[str, Any]) -> Education:
    # les années sont contrôlées sur l'état fusionné, pas seulement sur le body
    current = get_record_or_404(db, Education, education_id)
    year_start = data.get("year_start", current.year_start)
    year_end = data.get("year_end", current.year_end)
    if year_end < year_start:
        raise InvalidDataError("yearEnd must be greater than or equal to yearStart")
    return update_record(db, Education, education_id, data)
