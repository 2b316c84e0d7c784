from sqlalchemy import Boolean, Column, Integer, JSON, Numeric, String, Text
from .base import Base


class Product(Base):
    __tablename__ = "product"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    short_description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    origin = Column(String(255), nullable=False)
    category = Column(String(128), nullable=False)
    rating = Column(Numeric(2, 1), nullable=False)
    review_count = Column(Integer, nullable=False, default=0)
    image_url = Column(String(1024), nullable=False)
    qr_code = Column(String(1024), nullable=False)
    scientific_name = Column(String(255), nullable=True)
    extraction_method = Column(String(255), nullable=True)
    bioactive_compounds = Column(JSON, nullable=True)  # list[str]
    certifications = Column(JSON, nullable=True)  # list[str]
    sustainability_story = Column(Text, nullable=True)
    community_impact = Column(Text, nullable=True)
    research_papers = Column(JSON, nullable=True)  # [{title, url, year}]
    in_stock = Column(Boolean, nullable=False, default=True)
