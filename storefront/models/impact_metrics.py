from sqlalchemy import Column, Integer, Numeric, String
from .base import Base


class ImpactMetrics(Base):
    __tablename__ = "impact_metrics"

    id = Column(String(36), primary_key=True)
    schools_built = Column(Integer, nullable=False)
    families_supported = Column(Integer, nullable=False)
    hectares_protected = Column(Integer, nullable=False)
    amount_reinvested = Column(Numeric(12, 2), nullable=False)
    research_papers = Column(Integer, nullable=False)
    clinical_trials = Column(Integer, nullable=False)
    patents = Column(Integer, nullable=False)
