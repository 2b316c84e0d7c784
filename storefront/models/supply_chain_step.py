from sqlalchemy import Column, Integer, JSON, String, Text
from .base import Base


class SupplyChainStep(Base):
    __tablename__ = "supply_chain_step"

    id = Column(String(36), primary_key=True)
    step_number = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String(1024), nullable=False)
    details = Column(Text, nullable=False)
    location = Column(String(255), nullable=True)
    certifications = Column(JSON, nullable=True)
