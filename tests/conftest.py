"""
Shared fixtures.

Repository tests run the real SQL against a SQLite file database in the
test's tmp_path, one fresh database per test.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from sharebnb.database import Database
from sharebnb.hashing import PasswordHasher
from sharebnb.repositories.user_repository import UserRepository

# Lowest bcrypt cost, keeps the suite fast
TEST_WORK_FACTOR = 4

ALICE = {
    "username": "alice",
    "password": "password123",
    "first_name": "Alice",
    "last_name": "Adams",
    "email": "alice@example.com",
}

BOB = {
    "username": "bob",
    "password": "hunter22",
    "first_name": "Bob",
    "last_name": "Baker",
    "email": "bob@example.com",
}


@pytest.fixture
def hasher():
    return PasswordHasher(TEST_WORK_FACTOR)


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh SQLite database with the full schema."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    db = Database(url=None, engine=engine)
    await db.create_tables()

    yield db

    await db.dispose()


@pytest.fixture
def user_repo(database, hasher):
    return UserRepository(database, hasher)


async def add_listing(db, owner_id, name="Backyard pool", price=40):
    rows = await db.query(
        """INSERT INTO listings (owner_id, name, description, price, street, city, state, zip, genre)
           VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
           RETURNING id""",
        [owner_id, name, "A place", price, "1 Main St", "Oakland", "CA", "94601", "pool"],
    )
    return rows[0]["id"]


async def add_booking(db, owner_id, renter_id, listing_id):
    rows = await db.query(
        "INSERT INTO bookings (owner_id, renter_id, listing_id) VALUES ($1, $2, $3) RETURNING id",
        [owner_id, renter_id, listing_id],
    )
    return rows[0]["id"]


async def add_conversation(db, renter_id, owner_id, listing_id):
    rows = await db.query(
        "INSERT INTO conversations (renter_id, owner_id, listing_id) VALUES ($1, $2, $3) RETURNING id",
        [renter_id, owner_id, listing_id],
    )
    return rows[0]["id"]
