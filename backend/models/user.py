"""
User model - students and professionals
"""
from datetime import datetime
from typing import Optional
import enum

from .base import Base, isoformat


class UserType(str, enum.Enum):
    """User type enumeration"""
    STUDENT = "student"
    PROFESSIONAL = "professional"


class User(Base):
    """
    Marketplace account.
    Professionals publish videos, students purchase and rate them.
    """

    email: str
    username: str
    # Stored as given; the auth layer hands in a hash
    password: str
    name: str
    user_type: UserType

    # Profile
    bio: Optional[str] = None
    experience: Optional[int] = None  # Years
    profile_image: Optional[str] = None

    created_at: datetime

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, type={self.user_type.value})>"

    def is_professional(self) -> bool:
        """Check if user publishes videos"""
        return self.user_type == UserType.PROFESSIONAL

    def is_student(self) -> bool:
        """Check if user buys and rates videos"""
        return self.user_type == UserType.STUDENT

    def to_dict(self):
        """Convert to dictionary for API responses (password excluded)"""
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "name": self.name,
            "userType": self.user_type.value,
            "bio": self.bio,
            "experience": self.experience,
            "profileImage": self.profile_image,
            "createdAt": isoformat(self.created_at),
        }
