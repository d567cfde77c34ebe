"""
Derived views - joined records computed on every read, never stored
"""
from typing import List, Optional

from pydantic import BaseModel

from .user import User
from .video import Category, Video
from .purchase import Purchase


class ProfessionalSummary(BaseModel):
    """Public projection of a video's owner"""

    id: int
    name: str
    experience: Optional[int] = None
    profile_image: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "ProfessionalSummary":
        return cls(
            id=user.id,
            name=user.name,
            experience=user.experience,
            profile_image=user.profile_image,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "experience": self.experience,
            "profileImage": self.profile_image,
        }


class VideoWithDetails(BaseModel):
    """Video joined with its category, owner summary and rating stats"""

    video: Video
    category: Category
    professional: ProfessionalSummary
    average_rating: float = 0
    rating_count: int = 0

    @property
    def id(self) -> int:
        return self.video.id

    def to_dict(self):
        data = self.video.to_dict()
        data.update({
            "category": self.category.to_dict(),
            "professional": self.professional.to_dict(),
            "averageRating": self.average_rating,
            "ratingCount": self.rating_count,
        })
        return data


class ProfessionalWithVideos(BaseModel):
    """Professional joined with their catalog and cross-video average rating"""

    user: User
    videos: List[VideoWithDetails] = []
    average_rating: float = 0

    @property
    def id(self) -> int:
        return self.user.id

    def to_dict(self):
        data = self.user.to_dict()
        data.update({
            "videos": [video.to_dict() for video in self.videos],
            "averageRating": self.average_rating,
        })
        return data


class PurchaseWithVideo(BaseModel):
    """Purchase joined with the detailed video it unlocked"""

    purchase: Purchase
    video: VideoWithDetails

    def to_dict(self):
        data = self.purchase.to_dict()
        data["video"] = self.video.to_dict()
        return data
