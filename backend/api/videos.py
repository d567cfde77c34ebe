"""
Video API endpoints
Public catalog listing and details, publishing for professionals
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from pydantic import BaseModel, Field
from typing import Optional

from core.database import get_db, get_aggregator
from core.security import get_current_professional
from models.user import User
from services.aggregation import CatalogAggregator
from services.storage import MemStorage

router = APIRouter()


# ============================================
# Request Models (Pydantic schemas)
# ============================================

class CreateVideoRequest(BaseModel):
    """New video payload; the owner is taken from the token"""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    videoUrl: str = Field(..., min_length=1)
    thumbnailUrl: Optional[str] = None
    price: float = Field(..., ge=0)
    duration: int = Field(..., ge=0, description="Duration in seconds")
    categoryId: int


# ============================================
# Video Endpoints
# ============================================

@router.get("")
async def list_videos(
    categoryId: Optional[int] = Query(None, description="Filter by category ID"),
    catalog: CatalogAggregator = Depends(get_aggregator)
):
    """
    Get all videos with category, professional and rating stats

    Videos are returned in publication order.
    """
    return [video.to_dict() for video in catalog.videos_with_details(categoryId)]


@router.get("/{video_id}")
async def get_video_by_id(
    video_id: int,
    catalog: CatalogAggregator = Depends(get_aggregator)
):
    """Detailed video by ID"""
    video = catalog.video_with_details(video_id)

    if not video:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found"
        )

    return video.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_video(
    request: CreateVideoRequest,
    current_user: User = Depends(get_current_professional),
    db: MemStorage = Depends(get_db)
):
    """
    Publish a new video (professionals only)
    """
    if not db.get_category(request.categoryId):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )

    video = db.create_video(
        title=request.title,
        description=request.description,
        video_url=request.videoUrl,
        thumbnail_url=request.thumbnailUrl,
        price=request.price,
        duration=request.duration,
        user_id=current_user.id,
        category_id=request.categoryId,
    )

    return video.to_dict()
