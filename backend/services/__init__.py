"""
Business logic services for the Professional Video Marketplace
"""
from .storage import MemStorage
from .aggregation import CatalogAggregator

__all__ = ["MemStorage", "CatalogAggregator"]
