#!/usr/bin/env python3

import asyncio
import sys
import os

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from sharebnb.config import settings
from sharebnb.database import Database
from sharebnb.errors import BadRequestError
from sharebnb.hashing import PasswordHasher
from sharebnb.repositories.user_repository import UserRepository

async def create_test_users(user_repo):
    users_data = [
        {
            "username": "alice",
            "password": "password123",
            "first_name": "Alice",
            "last_name": "Adams",
            "email": "alice@example.com",
        },
        {
            "username": "bob",
            "password": "password123",
            "first_name": "Bob",
            "last_name": "Baker",
            "email": "bob@example.com",
        },
        {
            "username": "charlie",
            "password": "password123",
            "first_name": "Charlie",
            "last_name": "Chen",
            "email": "charlie@example.com",
        },
    ]

    created_users = []
    for user_data in users_data:
        try:
            user = await user_repo.register(**user_data)
            print(f"Created user: {user['username']} (ID: {user['id']})")
        except BadRequestError:
            user = await user_repo.get(user_data["username"])
            print(f"User {user_data['username']} exists (ID: {user['id']})")
        created_users.append(user)

    return created_users

async def create_test_listings(db, users):
    listings_data = [
        (users[0]["id"], "Backyard pool", "Heated pool with lounge chairs", 45, "12 Elm St", "Oakland", "CA", "94601", "pool"),
        (users[0]["id"], "Garage studio", "Quiet space for recording", 30, "12 Elm St", "Oakland", "CA", "94601", "studio"),
        (users[1]["id"], "Rooftop deck", "City views, seats eight", 60, "400 Market St", "San Francisco", "CA", "94105", "deck"),
    ]

    listings = []
    for row in listings_data:
        rows = await db.query(
            """INSERT INTO listings (owner_id, name, description, price, street, city, state, zip, genre)
               VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
               RETURNING id, owner_id, name""",
            list(row),
        )
        listings.append(rows[0])
        print(f"Created listing '{rows[0]['name']}' (ID: {rows[0]['id']})")

    return listings

async def create_test_bookings(db, users, listings):
    # bob and charlie rent alice's places; charlie rents bob's deck
    bookings_data = [
        (listings[0], users[1]),
        (listings[1], users[2]),
        (listings[2], users[2]),
    ]

    for listing, renter in bookings_data:
        await db.query(
            "INSERT INTO bookings (owner_id, renter_id, listing_id) VALUES ($1, $2, $3)",
            [listing["owner_id"], renter["id"], listing["id"]],
        )
        await db.query(
            "INSERT INTO conversations (renter_id, owner_id, listing_id) VALUES ($1, $2, $3)",
            [renter["id"], listing["owner_id"], listing["id"]],
        )
        print(f"{renter['username']} booked '{listing['name']}'")

async def main():
    print("Creating test data for ShareBnB...\n")

    db = Database(settings.DATABASE_URL)
    user_repo = UserRepository(db, PasswordHasher(settings.BCRYPT_WORK_FACTOR))

    try:
        print("1. Creating database tables...")
        await db.create_tables()
        print("Tables created\n")

        print("2. Creating test users...")
        users = await create_test_users(user_repo)
        print(f"Created/found {len(users)} users\n")

        print("3. Creating test listings...")
        listings = await create_test_listings(db, users)
        print(f"Created {len(listings)} listings\n")

        print("4. Creating test bookings and conversations...")
        await create_test_bookings(db, users, listings)

        print("\nTest data created successfully!")
        print("\nUsers:")
        for user in users:
            print(f"  - {user['username']} (ID: {user['id']}) - password: password123")

        print("\nUseful links:")
        print("  - API docs: http://localhost:8000/docs")
        print("  - ReDoc: http://localhost:8000/redoc")

    except Exception as e:
        print(f"Error creating test data: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
    finally:
        await db.dispose()

if __name__ == "__main__":
    asyncio.run(main())
