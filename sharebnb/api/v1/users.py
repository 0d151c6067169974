from typing import List
from fastapi import APIRouter, Depends

from sharebnb.auth import ensure_same_user, get_current_user_id, get_current_username, get_user_repository
from sharebnb.repositories.user_repository import UserRepository
from sharebnb.schemas.user import UserDetailResponse, UserResponse, UserUpdate

router = APIRouter(dependencies=[Depends(get_current_username)])

@router.get("/", response_model=List[UserResponse])
async def get_users(user_repo: UserRepository = Depends(get_user_repository)):
    """All users ordered by username"""
    # UserResponse drops the password hash get_all returns
    return await user_repo.get_all()

@router.get("/{username}", response_model=UserDetailResponse)
async def get_user(username: str, user_repo: UserRepository = Depends(get_user_repository)):
    """User with listings, bookings and conversations"""
    return await user_repo.get(username)

@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    current_user_id: int = Depends(get_current_user_id),
    user_repo: UserRepository = Depends(get_user_repository)
):
    """Partial update of the caller's own account"""
    ensure_same_user(user_id, current_user_id)
    data = user_data.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
    return await user_repo.update(user_id, data)

@router.delete("/{user_id}")
async def delete_user(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    user_repo: UserRepository = Depends(get_user_repository)
):
    """Delete the caller's own account"""
    ensure_same_user(user_id, current_user_id)
    await user_repo.remove(user_id)
    return {"deleted": user_id}
