from fastapi import APIRouter, Depends, status

from sharebnb.auth import get_user_repository, token_for
from sharebnb.repositories.user_repository import UserRepository
from sharebnb.schemas.user import Token, UserCreate, UserLogin

router = APIRouter()

@router.post("/token", response_model=Token)
async def login_user(user_data: UserLogin, user_repo: UserRepository = Depends(get_user_repository)):
    user = await user_repo.authenticate(user_data.username, user_data.password)
    return token_for(user)

@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register_user(user_data: UserCreate, user_repo: UserRepository = Depends(get_user_repository)):
    user = await user_repo.register(
        username=user_data.username,
        password=user_data.password,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
    )
    return token_for(user)
