"""
Purchase API endpoints
Payments are simulated: a purchase is recorded without contacting a gateway
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from typing import Optional

from core.database import get_db
from core.security import get_current_student, get_current_user
from models.user import User
from services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter()


class CreatePurchaseRequest(BaseModel):
    """Purchase payload; amount defaults to the video price"""
    videoId: int
    amount: Optional[float] = Field(None, ge=0)
    paymentMethod: str = Field("pix", min_length=1)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_purchase(
    request: CreatePurchaseRequest,
    current_user: User = Depends(get_current_student),
    db: MemStorage = Depends(get_db)
):
    """
    Buy a video (students only)

    - 404 if the video does not exist
    - 400 if the student already owns it
    """
    video = db.get_video(request.videoId)
    if not video:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found"
        )

    if db.get_user_purchase_by_video_id(current_user.id, video.id):
        logger.info(f"User {current_user.id} tried to buy video {video.id} twice")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Video already purchased"
        )

    purchase = db.create_purchase(
        user_id=current_user.id,
        video_id=video.id,
        amount=request.amount if request.amount is not None else video.price,
        payment_method=request.paymentMethod,
    )

    return purchase.to_dict()


@router.get("/user")
async def list_my_purchases(
    current_user: User = Depends(get_current_user),
    db: MemStorage = Depends(get_db)
):
    """Purchases made by the caller"""
    return [purchase.to_dict() for purchase in db.get_user_purchases(current_user.id)]
