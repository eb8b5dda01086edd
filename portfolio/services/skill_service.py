"""Skill service"""

from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from portfolio.models.skill import Skill


def list_skills(db: Session, category: Optional[str] = None) -> List[Skill]:
    query = db.query(Skill)
    if category:
        query = query.filter(Skill.category == category)
    return query.order_by(Skill.id.asc()).all()


def group_by_category(skills: List[Skill]) -> Dict[str, List[Skill]]:
    # les catégories gardent l'ordre de leur première apparition
    grouped: Dict[str, List[Skill]] = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)
    return grouped
