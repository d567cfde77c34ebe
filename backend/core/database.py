"""
Store lifecycle and FastAPI dependencies
The store lives on app.state from startup until the process exits
"""
import logging

from fastapi import Depends, Request

from core.config import settings
from services.aggregation import CatalogAggregator
from services.seed import seed_categories, seed_demo_data
from services.storage import MemStorage

logger = logging.getLogger(__name__)

# Password of the seeded demo accounts
DEMO_PASSWORD = "password123"


def init_db(store: MemStorage, seed_demo: bool = None) -> None:
    """
    Seed a fresh store - categories always, demo catalog if enabled
    """
    from core.security import hash_password

    seed_categories(store)

    if seed_demo is None:
        seed_demo = settings.SEED_DEMO_DATA
    if seed_demo:
        seed_demo_data(store, hash_password(DEMO_PASSWORD))


def get_db(request: Request) -> MemStorage:
    """
    Dependency for FastAPI routes to get the store
    Usage: db: MemStorage = Depends(get_db)
    """
    return request.app.state.store


def get_aggregator(db: MemStorage = Depends(get_db)) -> CatalogAggregator:
    """
    Dependency for read views over the store
    Usage: catalog: CatalogAggregator = Depends(get_aggregator)
    """
    return CatalogAggregator(db)
