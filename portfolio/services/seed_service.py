"""Données initiales du portfolio (admin + contenu d'exemple)"""

import logging
from sqlalchemy.orm import Session
from portfolio.core.config import settings
from portfolio.models.activity import Activity
from portfolio.models.pricing_plan import PricingPlan
from portfolio.models.project import Project
from portfolio.models.skill import Skill
from portfolio.models.user import User
from portfolio.services.settings_service import get_site_settings
from portfolio.services.user_service import create_user

logger = logging.getLogger(__name__)

SAMPLE_PROJECTS = [
    {
        "title": "Cosmic E-Commerce",
        "description": "Full-stack e-commerce platform with React, Node.js, and Stripe integration",
        "image": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=800&h=400",
        "technologies": ["React", "Node.js", "MongoDB", "Stripe"],
        "live_url": "https://cosmic-ecommerce.demo",
        "github_url": "https://github.com/cosmic/ecommerce",
        "featured": True,
    },
    {
        "title": "Stellar Tasks",
        "description": "Collaborative task management with real-time updates and team features",
        "image": "https://images.unsplash.com/photo-1611224923853-80b023f02d71?w=800&h=400",
        "technologies": ["Vue.js", "Express", "Socket.io", "PostgreSQL"],
        "live_url": "https://stellar-tasks.demo",
        "github_url": "https://github.com/cosmic/tasks",
        "featured": False,
    },
    {
        "title": "Galaxy Social",
        "description": "Modern social media platform with posts, stories, and messaging",
        "image": "https://images.unsplash.com/photo-1611162617474-5b21e879e113?w=800&h=400",
        "technologies": ["Next.js", "Prisma", "PostgreSQL", "Redis"],
        "live_url": "https://galaxy-social.demo",
        "github_url": "https://github.com/cosmic/social",
        "featured": True,
    },
]

SAMPLE_SKILLS = [
    {"name": "React.js", "category": "Frontend", "level": 95, "icon": "fab fa-react"},
    {"name": "TypeScript", "category": "Frontend", "level": 90, "icon": "fab fa-js"},
    {"name": "Tailwind CSS", "category": "Frontend", "level": 92, "icon": "fas fa-palette"},
    {"name": "Node.js", "category": "Backend", "level": 88, "icon": "fab fa-node-js"},
    {"name": "Express.js", "category": "Backend", "level": 85, "icon": "fas fa-server"},
    {"name": "Prisma ORM", "category": "Backend", "level": 80, "icon": "fas fa-layer-group"},
    {"name": "SQLite", "category": "Database", "level": 85, "icon": "fas fa-database"},
    {"name": "PostgreSQL", "category": "Database", "level": 82, "icon": "fas fa-database"},
    {"name": "MongoDB", "category": "Database", "level": 78, "icon": "fas fa-leaf"},
]

SAMPLE_ACTIVITIES = [
    {
        "title": "Tech Workshops",
        "description": "Leading coding workshops and mentoring developers in modern web technologies",
        "frequency": "Monthly",
        "icon": "fas fa-chalkboard-teacher",
    },
    {
        "title": "Open Source",
        "description": "Contributing to open source projects and maintaining cosmic development tools",
        "frequency": "Ongoing",
        "icon": "fas fa-code",
    },
    {
        "title": "Tech Talks",
        "description": "Speaking at conferences about fullstack development and emerging technologies",
        "frequency": "Quarterly",
        "icon": "fas fa-microphone",
    },
    {
        "title": "Tech Blogging",
        "description": "Writing technical articles and tutorials for the developer community",
        "frequency": "Weekly",
        "icon": "fas fa-blog",
    },
]

SAMPLE_PRICING_PLANS = [
    {
        "name": "Stellar Starter",
        "price": 2500,
        "duration": "per project",
        "features": ["Frontend Development", "Responsive Design", "Basic SEO", "1 Month Support"],
        "popular": False,
    },
    {
        "name": "Galactic Pro",
        "price": 5500,
        "duration": "per project",
        "features": ["Full-Stack Development", "Database Integration", "API Development", "Advanced SEO", "3 Months Support"],
        "popular": True,
    },
    {
        "name": "Cosmic Enterprise",
        "price": 12000,
        "duration": "per project",
        "features": ["Enterprise Architecture", "Microservices", "DevOps & CI/CD", "Performance Optimization", "6 Months Support"],
        "popular": False,
    },
]

_SAMPLES = [
    (Project, SAMPLE_PROJECTS),
    (Skill, SAMPLE_SKILLS),
    (Activity, SAMPLE_ACTIVITIES),
    (PricingPlan, SAMPLE_PRICING_PLANS),
]


def ensure_admin(db: Session) -> User:
    admin = db.query(User).filter(User.username == settings.ADMIN_USERNAME).first()
    if admin:
        return admin
    return create_user(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)


def seed_initial_data(db: Session, sample_data: bool = None) -> None:
    """Idempotent : une table n'est remplie que si elle est vide"""
    if sample_data is None:
        sample_data = settings.SEED_SAMPLE_DATA

    ensure_admin(db)
    get_site_settings(db)

    if not sample_data:
        return

    for model, rows in _SAMPLES:
        if db.query(model).first() is not None:
            continue
        db.add_all([model(**row) for row in rows])
        db.commit()
        logger.info(f"Seeded {len(rows)} {model.__tablename__}")
