"""
Storage Service - in-memory marketplace store
Holds users, categories, videos, purchases and ratings for the process lifetime
"""
import logging
from typing import Iterable, List, Optional

from models.user import User, UserType
from models.video import Category, Video
from models.purchase import Purchase, Rating
from services.repository import InMemoryRepository, Repository

logger = logging.getLogger(__name__)

# Profile fields a user may change after registration
USER_PROFILE_FIELDS = ("name", "email", "bio", "experience", "profile_image")


def _blank_to_none(value):
    """Empty optional strings are stored as None"""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MemStorage:
    """
    Marketplace store: one repository per entity kind.

    Lookups return None when a record is missing. Uniqueness of users,
    purchases and ratings is checked by the caller through the find
    helpers before writing; the store itself does not enforce it.
    """

    def __init__(self):
        self.users: Repository[User] = InMemoryRepository(User)
        self.categories: Repository[Category] = InMemoryRepository(Category)
        self.videos: Repository[Video] = InMemoryRepository(Video)
        self.purchases: Repository[Purchase] = InMemoryRepository(Purchase)
        self.ratings: Repository[Rating] = InMemoryRepository(Rating)

    # ============================================
    # User operations
    # ============================================

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive exact match, first wins"""
        wanted = username.lower()
        return self.users.find(lambda user: user.username.lower() == wanted)

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive exact match, first wins"""
        wanted = email.lower()
        return self.users.find(lambda user: user.email.lower() == wanted)

    def get_users_by_type(self, user_type: UserType) -> List[User]:
        return self.users.filter(lambda user: user.user_type == user_type)

    def create_user(
        self,
        email: str = None,
        username: str = None,
        password: str = None,
        name: str = None,
        user_type: UserType = None,
        bio: Optional[str] = None,
        experience: Optional[int] = None,
        profile_image: Optional[str] = None,
    ) -> User:
        user = self.users.create(
            email=email,
            username=username,
            password=password,
            name=name,
            user_type=user_type,
            bio=_blank_to_none(bio),
            experience=experience,
            profile_image=_blank_to_none(profile_image),
        )
        logger.info(f"Registered {user.user_type.value} '{user.username}' (id={user.id})")
        return user

    def update_user(self, user_id: int, **fields) -> User:
        """
        Update profile fields of a user

        Only name, email, bio, experience and profile_image can change;
        anything else is ignored.

        Raises:
            RecordNotFoundError: If the user does not exist
        """
        changes = {
            name: _blank_to_none(value)
            for name, value in fields.items()
            if name in USER_PROFILE_FIELDS
        }
        # name and email can be replaced but never cleared
        for required in ("name", "email"):
            if required in changes and changes[required] is None:
                del changes[required]
        return self.users.update(user_id, **changes)

    # ============================================
    # Category operations
    # ============================================

    def get_all_categories(self) -> List[Category]:
        return self.categories.all()

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.categories.get(category_id)

    def get_category_by_name(self, name: str) -> Optional[Category]:
        return self.categories.find(lambda category: category.name == name)

    def create_category(self, name: str = None, display_name: str = None, color: str = None) -> Category:
        return self.categories.create(name=name, display_name=display_name, color=color)

    # ============================================
    # Video operations
    # ============================================

    def get_video(self, video_id: int) -> Optional[Video]:
        return self.videos.get(video_id)

    def get_all_videos(self, category_id: Optional[int] = None) -> List[Video]:
        if category_id is None:
            return self.videos.all()
        return self.videos.filter(lambda video: video.category_id == category_id)

    def get_user_videos(self, user_id: int) -> List[Video]:
        """Videos owned by a professional"""
        return self.videos.filter(lambda video: video.user_id == user_id)

    def create_video(
        self,
        title: str = None,
        description: str = None,
        video_url: str = None,
        price: float = None,
        duration: int = None,
        user_id: int = None,
        category_id: int = None,
        thumbnail_url: Optional[str] = None,
    ) -> Video:
        video = self.videos.create(
            title=title,
            description=description,
            video_url=video_url,
            thumbnail_url=_blank_to_none(thumbnail_url),
            price=price,
            duration=duration,
            user_id=user_id,
            category_id=category_id,
        )
        logger.info(f"Published video '{video.title}' (id={video.id}) by user {video.user_id}")
        return video

    # ============================================
    # Purchase operations
    # ============================================

    def create_purchase(
        self,
        user_id: int = None,
        video_id: int = None,
        amount: float = None,
        payment_method: str = None,
    ) -> Purchase:
        return self.purchases.create(
            user_id=user_id,
            video_id=video_id,
            amount=amount,
            payment_method=payment_method,
        )

    def get_user_purchases(self, user_id: int) -> List[Purchase]:
        return self.purchases.filter(lambda purchase: purchase.user_id == user_id)

    def get_user_purchase_by_video_id(self, user_id: int, video_id: int) -> Optional[Purchase]:
        return self.purchases.find(
            lambda purchase: purchase.user_id == user_id and purchase.video_id == video_id
        )

    def get_videos_purchases(self, video_ids: Iterable[int]) -> List[Purchase]:
        wanted = set(video_ids)
        return self.purchases.filter(lambda purchase: purchase.video_id in wanted)

    # ============================================
    # Rating operations
    # ============================================

    def create_rating(
        self,
        user_id: int = None,
        video_id: int = None,
        rating: int = None,
        comment: Optional[str] = None,
    ) -> Rating:
        return self.ratings.create(
            user_id=user_id,
            video_id=video_id,
            rating=rating,
            comment=_blank_to_none(comment),
        )

    def update_rating(self, rating_id: int, rating: int, comment: Optional[str] = None) -> Rating:
        """
        Replace score and comment of an existing rating

        Raises:
            RecordNotFoundError: If the rating does not exist
        """
        return self.ratings.update(rating_id, rating=rating, comment=_blank_to_none(comment))

    def upsert_rating(self, user_id: int, video_id: int, rating: int, comment: Optional[str] = None) -> Rating:
        """Create the (user, video) rating, or update it in place if it exists"""
        existing = self.get_user_rating_by_video_id(user_id, video_id)
        if existing:
            return self.update_rating(existing.id, rating, comment)
        return self.create_rating(user_id=user_id, video_id=video_id, rating=rating, comment=comment)

    def get_user_ratings(self, user_id: int) -> List[Rating]:
        return self.ratings.filter(lambda rating: rating.user_id == user_id)

    def get_video_ratings(self, video_id: int) -> List[Rating]:
        return self.ratings.filter(lambda rating: rating.video_id == video_id)

    def get_videos_ratings(self, video_ids: Iterable[int]) -> List[Rating]:
        wanted = set(video_ids)
        return self.ratings.filter(lambda rating: rating.video_id in wanted)

    def get_user_rating_by_video_id(self, user_id: int, video_id: int) -> Optional[Rating]:
        return self.ratings.find(
            lambda rating: rating.user_id == user_id and rating.video_id == video_id
        )
