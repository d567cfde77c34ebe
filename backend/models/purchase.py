"""
Purchase and Rating models - student activity on videos
"""
from datetime import datetime
from typing import Optional

from .base import Base, isoformat


class Purchase(Base):
    """
    A student's (simulated) payment for a video.
    One purchase per (user_id, video_id); the API checks before creating.
    """

    user_id: int
    video_id: int
    amount: float
    payment_method: str
    created_at: datetime

    def __repr__(self):
        return f"<Purchase(id={self.id}, user_id={self.user_id}, video_id={self.video_id})>"

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "videoId": self.video_id,
            "amount": self.amount,
            "paymentMethod": self.payment_method,
            "createdAt": isoformat(self.created_at),
        }


class Rating(Base):
    """
    1-5 star rating of a purchased video.
    One rating per (user_id, video_id); resubmitting updates it.
    """

    user_id: int
    video_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime

    def __repr__(self):
        return f"<Rating(id={self.id}, video_id={self.video_id}, rating={self.rating})>"

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "videoId": self.video_id,
            "rating": self.rating,
            "comment": self.comment,
            "createdAt": isoformat(self.created_at),
        }
