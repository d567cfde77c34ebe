"""
Record models for the Professional Video Marketplace
In-memory entities plus the derived views built from them
"""
from .base import Base
from .user import User, UserType
from .video import Video, Category
from .purchase import Purchase, Rating
from .views import ProfessionalSummary, VideoWithDetails, ProfessionalWithVideos, PurchaseWithVideo

__all__ = [
    "Base",
    "User",
    "UserType",
    "Video",
    "Category",
    "Purchase",
    "Rating",
    "ProfessionalSummary",
    "VideoWithDetails",
    "ProfessionalWithVideos",
    "PurchaseWithVideo",
]
