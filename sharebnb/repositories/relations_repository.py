import asyncio
from typing import Any, Dict, List

from sharebnb.database import Database

LISTINGS_SQL = """
    SELECT id, name, description, price, street, city, state, zip, genre
      FROM listings
     WHERE owner_id = $1
  ORDER BY id"""

BOOKINGS_SQL = """
    SELECT id, owner_id, renter_id, listing_id, created_at
      FROM bookings
     WHERE renter_id = $1
  ORDER BY id"""

CONVERSATIONS_SQL = """
    SELECT id, renter_id, owner_id, listing_id
      FROM conversations
     WHERE owner_id = $1 OR renter_id = $1
  ORDER BY id"""


class RelationsRepository:
    """Reads the rows that reference a user from other tables."""

    def __init__(self, db: Database):
        self.db = db

    async def get_listings(self, user_id: int) -> List[Dict[str, Any]]:
        """Listings owned by the user"""
        return await self.db.query(LISTINGS_SQL, [user_id])

    async def get_bookings(self, user_id: int) -> List[Dict[str, Any]]:
        """Bookings where the user is the renter"""
        return await self.db.query(BOOKINGS_SQL, [user_id])

    async def get_conversations(self, user_id: int) -> List[Dict[str, Any]]:
        """Conversations where the user is the owner or the renter"""
        return await self.db.query(CONVERSATIONS_SQL, [user_id])

    async def attach(self, user: Dict[str, Any]) -> Dict[str, Any]:
        """Add listings, bookings and conversations to ``user`` in place.

        The three reads are independent and run concurrently; each list is
        ordered by id and may be empty.
        """
        listings, bookings, conversations = await asyncio.gather(
            self.get_listings(user["id"]),
            self.get_bookings(user["id"]),
            self.get_conversations(user["id"]),
        )
        user["listings"] = listings
        user["bookings"] = bookings
        user["conversations"] = conversations
        return user
