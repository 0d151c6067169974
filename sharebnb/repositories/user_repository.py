from typing import Any, Dict, List, Mapping

from sqlalchemy.exc import IntegrityError

from sharebnb.database import Database
from sharebnb.errors import BadRequestError, NotFoundError, UnauthorizedError, ValidationError
from sharebnb.hashing import PasswordHasher
from sharebnb.logger import get_logger
from sharebnb.repositories.relations_repository import RelationsRepository
from sharebnb.sql import USER_COLUMNS, UserField, sql_for_partial_update

logger = get_logger(__name__)

PUBLIC_COLUMNS = """id,
           username,
           first_name AS "firstName",
           last_name AS "lastName",
           email"""


class UserRepository:
    """All reads and writes of the users table.

    Every method returns the public projection of a user (no password hash)
    except ``get_all``, which returns the raw rows including ``password``.
    """

    def __init__(self, db: Database, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher
        self.relations = RelationsRepository(db)

    async def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        """Return the user for valid credentials.

        Raises UnauthorizedError when the username is unknown or the password
        is wrong, with the same message in both cases.
        """
        rows = await self.db.query(
            f"""SELECT {PUBLIC_COLUMNS},
           password
      FROM users
     WHERE username = $1""",
            [username],
        )

        if rows:
            user = rows[0]
            if self.hasher.verify(password, user.pop("password")):
                return user
        else:
            # Same bcrypt cost as a wrong password, so timing does not reveal the username
            self.hasher.verify(password, self.hasher.dummy_hash)

        logger.warning("Failed login attempt")
        raise UnauthorizedError("Invalid username/password")

    async def register(
        self,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> Dict[str, Any]:
        """Create a user. Raises BadRequestError if the username is taken."""
        duplicate = await self.db.query(
            "SELECT username FROM users WHERE username = $1",
            [username],
        )
        if duplicate:
            raise BadRequestError(f"Duplicate username: {username}")

        hashed_password = self.hasher.hash(password)

        # The pre-check above can lose a race; the unique constraint cannot
        try:
            rows = await self.db.query(
                f"""INSERT INTO users
           (username, password, first_name, last_name, email)
    VALUES ($1, $2, $3, $4, $5)
 RETURNING {PUBLIC_COLUMNS}""",
                [username, hashed_password, first_name, last_name, email],
            )
        except IntegrityError:
            raise BadRequestError(f"Duplicate username: {username}")

        logger.info(f"Registered user {username}")
        return rows[0]

    async def get_all(self) -> List[Dict[str, Any]]:
        """All users ordered by username, password hash included."""
        return await self.db.query(
            f"""SELECT {PUBLIC_COLUMNS},
           password
      FROM users
  ORDER BY username"""
        )

    async def get(self, username: str) -> Dict[str, Any]:
        """User with their listings, bookings and conversations.

        Raises NotFoundError if there is no such username.
        """
        rows = await self.db.query(
            f"""SELECT {PUBLIC_COLUMNS}
      FROM users
     WHERE username = $1""",
            [username],
        )
        if not rows:
            raise NotFoundError(f"User not found: {username}")

        return await self.relations.attach(rows[0])

    async def update(self, user_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Partial update with any subset of firstName, lastName, email, password.

        Raises ValidationError for an empty or unknown field and NotFoundError
        if no user has ``user_id``.
        """
        try:
            fields = {UserField(key): value for key, value in data.items()}
        except ValueError as e:
            raise ValidationError(f"Cannot update field: {e}")

        if UserField.PASSWORD in fields:
            if not fields[UserField.PASSWORD]:
                raise ValidationError("Password cannot be empty")
            fields[UserField.PASSWORD] = self.hasher.hash(fields[UserField.PASSWORD])

        update = sql_for_partial_update(fields, USER_COLUMNS)
        id_idx = len(update.values) + 1

        rows = await self.db.query(
            f"""UPDATE users
       SET {update.set_cols}
     WHERE id = ${id_idx}
 RETURNING {PUBLIC_COLUMNS}""",
            [*update.values, user_id],
        )
        if not rows:
            raise NotFoundError(f"No user: {user_id}")

        logger.info(f"Updated user {user_id}: {', '.join(f.value for f in fields)}")
        return rows[0]

    async def remove(self, user_id: int) -> None:
        """Delete a user. Raises NotFoundError if no row was removed."""
        rows = await self.db.query(
            "DELETE FROM users WHERE id = $1 RETURNING id",
            [user_id],
        )
        if not rows:
            raise NotFoundError(f"No user: {user_id}")

        logger.info(f"Removed user {user_id}")
