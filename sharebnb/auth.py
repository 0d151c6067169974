from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from sharebnb.config import settings
from sharebnb.database import Database, get_database
from sharebnb.hashing import PasswordHasher
from sharebnb.repositories.user_repository import UserRepository

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")


@lru_cache
def get_password_hasher() -> PasswordHasher:
    # One per process so its dummy hash is built once
    return PasswordHasher(settings.BCRYPT_WORK_FACTOR)


def get_user_repository(
    db: Database = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserRepository:
    return UserRepository(db, hasher)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=15))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def token_for(user: dict) -> dict:
    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token = create_access_token(data={"sub": user["username"], "uid": user["id"]}, expires_delta=expires)
    return {"access_token": token, "token_type": "bearer", "expires_in": settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60}


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_access_token(token: str = Depends(oauth2_scheme)) -> dict:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise _credentials_exception()

    if payload.get("sub") is None or not isinstance(payload.get("uid"), int):
        raise _credentials_exception()
    return payload


async def get_current_username(payload: dict = Depends(decode_access_token)) -> str:
    return payload["sub"]


async def get_current_user_id(payload: dict = Depends(decode_access_token)) -> int:
    return payload["uid"]


def ensure_same_user(user_id: int, current_user_id: int):
    if user_id != current_user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Cannot change another user's account",
        )
