from sqlalchemy import Column, Integer, ForeignKey
from .base import BaseModel

class Conversation(BaseModel):
    __tablename__ = "conversations"

    renter_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    listing_id = Column(Integer, ForeignKey("listings.id", ondelete="CASCADE"), nullable=False, index=True)
