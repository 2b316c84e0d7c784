from .base import Base
from .impact_metrics import ImpactMetrics
from .product import Product
from .supply_chain_step import SupplyChainStep

__all__ = ["Base", "ImpactMetrics", "Product", "SupplyChainStep"]
