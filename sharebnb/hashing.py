"""Password hashing with bcrypt.

The work factor is fixed per hasher instance; every call to ``hash`` draws a
fresh salt, so hashing the same password twice gives two different digests
that both verify.
"""

from typing import Optional

import bcrypt

from sharebnb.errors import ValidationError

MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31
# bcrypt only reads this many bytes of input
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


class PasswordHasher:
    """Hash and verify passwords.

    Examples
    --------
    >>> hasher = PasswordHasher(work_factor=4)
    >>> digest = hasher.hash("secret")
    >>> hasher.verify("secret", digest)
    True
    >>> hasher.verify("wrong", digest)
    False
    """

    def __init__(self, work_factor: int):
        if not isinstance(work_factor, int) or not MIN_WORK_FACTOR <= work_factor <= MAX_WORK_FACTOR:
            raise ValueError(
                f"bcrypt work factor must be an int in [{MIN_WORK_FACTOR}, {MAX_WORK_FACTOR}], "
                f"got {work_factor!r}"
            )
        self.work_factor = work_factor
        self._dummy_hash: Optional[str] = None

    @property
    def dummy_hash(self) -> str:
        """Digest of a random password at this work factor, built on first use.

        Verifying against it costs the same as verifying a real user's hash.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(bcrypt.gensalt().decode("ascii"))
        return self._dummy_hash

    def hash(self, password: str) -> str:
        """Return the bcrypt digest of ``password`` as text.

        Raises ValidationError for passwords over 72 bytes in UTF-8.
        """
        if not isinstance(password, str):
            raise TypeError("password must be a str")
        if password_too_long(password):
            raise ValidationError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.work_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against ``password_hash``.

        A wrong password gives False, including one too long to ever have
        been hashed. A digest that is not a bcrypt hash raises ValueError.
        """
        if password_too_long(password):
            return False
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
