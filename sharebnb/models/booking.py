from sqlalchemy import Column, Integer, ForeignKey, DateTime, func
from .base import BaseModel

class Booking(BaseModel):
    __tablename__ = "bookings"

    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    renter_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    listing_id = Column(Integer, ForeignKey("listings.id", ondelete="CASCADE"), nullable=False, index=True)
    # Set by the database: rows are inserted with raw SQL
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
