"""
Authentication API endpoints
Handles registration, login and JWT token management
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from core.database import get_db
from core.security import create_user_token, get_current_user, verify_password, hash_password
from models.user import User, UserType
from services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================
# Request/Response Models (Pydantic schemas)
# ============================================

class LoginRequest(BaseModel):
    """Login request payload"""
    username: str
    password: str


class RegisterRequest(BaseModel):
    """Registration request payload"""
    name: str = Field(..., min_length=1)
    email: EmailStr
    username: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    userType: UserType
    bio: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0, description="Years of experience")
    profileImage: Optional[str] = None


class TokenResponse(BaseModel):
    """Token response"""
    access_token: str
    token_type: str = "bearer"
    user: dict


# ============================================
# Authentication Endpoints
# ============================================

@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: MemStorage = Depends(get_db)
):
    """
    Register a new student or professional
    Username and email must not be taken (case-insensitive)
    """
    if db.get_user_by_username(request.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )

    if db.get_user_by_email(request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists"
        )

    new_user = db.create_user(
        email=request.email,
        username=request.username,
        password=hash_password(request.password),
        name=request.name,
        user_type=request.userType,
        bio=request.bio,
        experience=request.experience,
        profile_image=request.profileImage,
    )

    return TokenResponse(
        access_token=create_user_token(new_user),
        user=new_user.to_dict()
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    db: MemStorage = Depends(get_db)
):
    """
    Login with username and password and return JWT token
    """
    user = db.get_user_by_username(request.username)

    if not user or not verify_password(request.password, user.password):
        logger.info(f"Failed login for '{request.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    return TokenResponse(
        access_token=create_user_token(user),
        user=user.to_dict()
    )


@router.get("/me")
async def get_current_user_profile(
    current_user: User = Depends(get_current_user)
):
    """
    Get current authenticated user profile
    Requires valid JWT token in Authorization header
    """
    return current_user.to_dict()


@router.post("/logout")
async def logout():
    """
    Logout user
    Note: JWT tokens are stateless, so this is mostly for client-side cleanup
    """
    return {"message": "Logged out successfully"}
