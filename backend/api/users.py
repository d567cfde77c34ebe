"""
User profile API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from core.database import get_db
from core.security import get_current_user
from models.user import User
from services.storage import MemStorage

router = APIRouter()


class UpdateProfileRequest(BaseModel):
    """Profile fields a user can change; omitted fields are left as they are"""
    name: Optional[str] = Field(None, min_length=2)
    email: Optional[EmailStr] = None
    bio: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0)
    profileImage: Optional[str] = None


@router.get("/{user_id}")
async def get_user_profile(
    user_id: int,
    db: MemStorage = Depends(get_db)
):
    """Public profile of any user"""
    user = db.get_user(user_id)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    return user.to_dict()


@router.put("/{user_id}")
async def update_user_profile(
    user_id: int,
    request: UpdateProfileRequest,
    current_user: User = Depends(get_current_user),
    db: MemStorage = Depends(get_db)
):
    """
    Update the caller's own profile

    - **name**, **email**, **bio**, **experience**, **profileImage**
    - Email must stay unique (case-insensitive)
    """
    if current_user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only update your own profile"
        )

    if request.email:
        owner = db.get_user_by_email(request.email)
        if owner and owner.id != current_user.id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already exists"
            )

    fields = request.model_dump(exclude_unset=True)
    if "profileImage" in fields:
        fields["profile_image"] = fields.pop("profileImage")

    updated = db.update_user(current_user.id, **fields)
    return updated.to_dict()
