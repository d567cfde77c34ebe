"""
Rating API endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from typing import Optional

from core.database import get_db
from core.security import get_current_student
from models.user import User
from services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter()


class RatingRequest(BaseModel):
    """Star rating of a purchased video"""
    videoId: int
    rating: int = Field(..., ge=1, le=5, description="1-5 stars")
    comment: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED)
async def rate_video(
    request: RatingRequest,
    current_user: User = Depends(get_current_student),
    db: MemStorage = Depends(get_db)
):
    """
    Rate a video (students only)

    The video must have been purchased first. Rating the same video
    again replaces the previous score and comment.
    """
    video = db.get_video(request.videoId)
    if not video:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found"
        )

    if not db.get_user_purchase_by_video_id(current_user.id, video.id):
        logger.info(f"User {current_user.id} tried to rate unpurchased video {video.id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You must purchase the video before rating it"
        )

    rating = db.upsert_rating(
        user_id=current_user.id,
        video_id=video.id,
        rating=request.rating,
        comment=request.comment,
    )

    return rating.to_dict()


@router.get("/video/{video_id}")
async def list_video_ratings(
    video_id: int,
    db: MemStorage = Depends(get_db)
):
    """All ratings of a video"""
    return [rating.to_dict() for rating in db.get_video_ratings(video_id)]
