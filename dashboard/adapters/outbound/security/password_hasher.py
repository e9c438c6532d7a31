# dashboard/adapters/outbound/security/password_hasher.py

import logging

import bcrypt
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

# bcrypt only reads this many bytes of input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """
    bcrypt password hashing with a configurable work factor.

    The work factor comes from Settings.BCRYPT_ROUNDS and is fixed for the
    lifetime of the instance. Hashing and verification are CPU-bound, so the
    async variants run them in the thread pool.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of a plain text password."""
        secret = password.encode("utf-8")
        if len(secret) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password is longer than {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(secret, salt).decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        candidate = plain_password.encode("utf-8")
        if len(candidate) > MAX_PASSWORD_BYTES:
            # no stored hash can come from a longer password
            return False
        try:
            return bcrypt.checkpw(candidate, hashed_password.encode("utf-8"))
        except ValueError:
            # malformed stored hash
            logger.warning("Stored password hash could not be parsed")
            return False

    async def hash_password(self, password: str) -> str:
        return await run_in_threadpool(self.hash, password)

    async def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return await run_in_threadpool(self.verify, plain_password, hashed_password)
