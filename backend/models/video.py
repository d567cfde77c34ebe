"""
Catalog models - Categories and Videos
"""
from datetime import datetime
from typing import Optional

from .base import Base, isoformat


class Category(Base):
    """
    Career area a video belongs to (technology, health, law, ...)
    Seeded at startup, never created by users.
    """

    name: str  # Unique machine key
    display_name: str
    color: str  # Display hint, e.g. "#3A86FF"

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "displayName": self.display_name,
            "color": self.color,
        }


class Video(Base):
    """
    Paid video published by a professional
    """

    title: str
    description: str
    video_url: str
    thumbnail_url: Optional[str] = None
    price: float
    duration: int  # Duration in seconds

    # References, not checked by the store
    user_id: int
    category_id: int

    created_at: datetime

    def __repr__(self):
        return f"<Video(id={self.id}, title={self.title}, user_id={self.user_id})>"

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "videoUrl": self.video_url,
            "thumbnailUrl": self.thumbnail_url,
            "price": self.price,
            "duration": self.duration,
            "userId": self.user_id,
            "categoryId": self.category_id,
            "createdAt": isoformat(self.created_at),
        }
