from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from sharebnb.hashing import MAX_PASSWORD_BYTES, password_too_long

def check_password_bytes(password: Optional[str]) -> Optional[str]:
    # max_length counts characters, bcrypt counts UTF-8 bytes
    if password is not None and password_too_long(password):
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    return password

class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=25)
    first_name: str = Field(alias="firstName", min_length=1, max_length=50)
    last_name: str = Field(alias="lastName", min_length=1, max_length=50)
    email: str = Field(min_length=6, max_length=100)

    class Config:
        populate_by_name = True

class UserCreate(UserBase):
    password: str = Field(min_length=5, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, password):
        return check_password_bytes(password)

class UserLogin(BaseModel):
    username: str
    password: str

class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, alias="firstName", min_length=1, max_length=50)
    last_name: Optional[str] = Field(default=None, alias="lastName", min_length=1, max_length=50)
    email: Optional[str] = Field(default=None, min_length=6, max_length=100)
    password: Optional[str] = Field(default=None, min_length=5, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, password):
        return check_password_bytes(password)

    class Config:
        populate_by_name = True
        extra = "forbid"

class UserResponse(UserBase):
    id: int

class ListingResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    genre: Optional[str] = None

class BookingResponse(BaseModel):
    id: int
    owner_id: int
    renter_id: int
    listing_id: int
    created_at: datetime

class ConversationResponse(BaseModel):
    id: int
    renter_id: int
    owner_id: int
    listing_id: int

class UserDetailResponse(UserResponse):
    listings: List[ListingResponse]
    bookings: List[BookingResponse]
    conversations: List[ConversationResponse]

class Token(BaseModel):
    access_token: str
    token_type: str
    expires_in: int
