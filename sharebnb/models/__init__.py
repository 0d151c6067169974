from .base import Base
from .user import User
from .listing import Listing
from .booking import Booking
from .conversation import Conversation

__all__ = [
    "Base",
    "User",
    "Listing",
    "Booking",
    "Conversation",
]
