from sqlalchemy import Column, String
from .base import BaseModel

class User(BaseModel):
    __tablename__ = "users"

    # unique=True is what actually guarantees no duplicate usernames
    username = Column(String(25), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False)
