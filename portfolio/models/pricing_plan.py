"""PricingPlan model"""

from sqlalchemy import Column, Integer, String, Boolean
from portfolio.core.database import Base
from portfolio.core.serialization import StringList


class PricingPlan(Base):
    __tablename__ = "pricing_plans"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)  # plus petite unité monétaire
    duration = Column(String(255), nullable=False)
    features = Column(StringList, nullable=False, default=list)
    popular = Column(Boolean, nullable=False, default=False)
