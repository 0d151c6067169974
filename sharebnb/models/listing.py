from sqlalchemy import Column, Integer, ForeignKey, String, Text, Numeric
from .base import BaseModel

class Listing(BaseModel):
    __tablename__ = "listings"

    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    street = Column(String(100), nullable=True)
    city = Column(String(50), nullable=True)
    state = Column(String(2), nullable=True)
    zip = Column(String(10), nullable=True)
    genre = Column(String(50), nullable=True)
