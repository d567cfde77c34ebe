"""
Aggregation Service - denormalized read views over the store
Every view is recomputed on each call; nothing here writes to the store
"""
import logging
from typing import Any, Dict, List, Optional

from models.user import UserType
from models.views import (
    ProfessionalSummary,
    ProfessionalWithVideos,
    PurchaseWithVideo,
    VideoWithDetails,
)
from services.storage import MemStorage

logger = logging.getLogger(__name__)


def _mean(values: List[float]) -> float:
    """Arithmetic mean, 0 for no values"""
    if not values:
        return 0
    return sum(values) / len(values)


class CatalogAggregator:
    """
    Builds VideoWithDetails / ProfessionalWithVideos views and dashboard data.

    Videos whose category or owner cannot be resolved are treated as absent:
    a single lookup returns None, listings skip them.
    """

    def __init__(self, storage: MemStorage):
        self.storage = storage

    # ============================================
    # Videos
    # ============================================

    def video_with_details(self, video_id: int) -> Optional[VideoWithDetails]:
        video = self.storage.get_video(video_id)
        if not video:
            return None

        category = self.storage.get_category(video.category_id)
        if not category:
            logger.warning(f"Video {video_id} references missing category {video.category_id}")
            return None

        professional = self.storage.get_user(video.user_id)
        if not professional:
            logger.warning(f"Video {video_id} references missing owner {video.user_id}")
            return None

        ratings = self.storage.get_video_ratings(video_id)

        return VideoWithDetails(
            video=video,
            category=category,
            professional=ProfessionalSummary.from_user(professional),
            average_rating=_mean([rating.rating for rating in ratings]),
            rating_count=len(ratings),
        )

    def videos_with_details(self, category_id: Optional[int] = None) -> List[VideoWithDetails]:
        """Detailed videos in store insertion order, optionally for one category"""
        details = []
        for video in self.storage.get_all_videos(category_id):
            detail = self.video_with_details(video.id)
            if detail:
                details.append(detail)
        return details

    # ============================================
    # Professionals
    # ============================================

    def _with_videos(self, professional, catalog: List[VideoWithDetails]) -> ProfessionalWithVideos:
        videos = [video for video in catalog if video.professional.id == professional.id]

        # Unrated videos are left out of the mean, not counted as zero
        rated = [video.average_rating for video in videos if video.average_rating > 0]

        return ProfessionalWithVideos(
            user=professional,
            videos=videos,
            average_rating=_mean(rated),
        )

    def professional_with_videos(self, user_id: int) -> Optional[ProfessionalWithVideos]:
        professional = self.storage.get_user(user_id)
        if not professional or not professional.is_professional():
            return None
        return self._with_videos(professional, self.videos_with_details())

    def professionals_with_videos(self) -> List[ProfessionalWithVideos]:
        catalog = self.videos_with_details()
        return [
            self._with_videos(professional, catalog)
            for professional in self.storage.get_users_by_type(UserType.PROFESSIONAL)
        ]

    # ============================================
    # Purchases and dashboards
    # ============================================

    def user_purchases_with_videos(self, user_id: int) -> List[PurchaseWithVideo]:
        """A student's purchases joined with the videos; unresolvable videos are skipped"""
        result = []
        for purchase in self.storage.get_user_purchases(user_id):
            video = self.video_with_details(purchase.video_id)
            if video:
                result.append(PurchaseWithVideo(purchase=purchase, video=video))
        return result

    def professional_dashboard(self, user_id: int) -> Dict[str, Any]:
        """
        Sales and rating data for a professional's own videos

        Returns:
            dict with raw videos, purchases and ratings plus a summary
            (totals and a per-video breakdown)
        """
        videos = self.storage.get_user_videos(user_id)
        video_ids = [video.id for video in videos]
        purchases = self.storage.get_videos_purchases(video_ids)
        ratings = self.storage.get_videos_ratings(video_ids)

        breakdown = []
        for video in videos:
            video_purchases = [p for p in purchases if p.video_id == video.id]
            video_ratings = [r.rating for r in ratings if r.video_id == video.id]
            breakdown.append({
                "videoId": video.id,
                "title": video.title,
                "sales": len(video_purchases),
                "revenue": sum(p.amount for p in video_purchases),
                "ratingCount": len(video_ratings),
                "averageRating": _mean(video_ratings),
            })

        return {
            "videos": videos,
            "purchases": purchases,
            "ratings": ratings,
            "summary": {
                "totalVideos": len(videos),
                "totalSales": len(purchases),
                "totalRevenue": sum(p.amount for p in purchases),
                "averageRating": _mean([r.rating for r in ratings]),
                "videos": breakdown,
            },
        }

    def student_dashboard(self, user_id: int) -> Dict[str, Any]:
        return {
            "purchases": self.user_purchases_with_videos(user_id),
            "ratings": self.storage.get_user_ratings(user_id),
        }
