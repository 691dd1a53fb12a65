"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user
from src.models.user import User
from src.schemas.auth import UserResponse

router = APIRouter(prefix="/user", tags=["users"])


@router.get("", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
