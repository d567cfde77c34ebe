"""
Category API endpoints
"""
from fastapi import APIRouter, Depends

from core.database import get_db
from services.storage import MemStorage

router = APIRouter()


@router.get("")
async def list_categories(db: MemStorage = Depends(get_db)):
    """All categories in seed order"""
    return [category.to_dict() for category in db.get_all_categories()]
