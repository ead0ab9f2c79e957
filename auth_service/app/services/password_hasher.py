"""
Password Hasher

bcrypt hashing and verification of plaintext passwords. Both operations run
in a worker thread so the adaptive cost never blocks the event loop.
"""

import asyncio
from typing import Optional

import bcrypt

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Salted one-way password hashing.

    Business Rules:
    - bcrypt with a configurable cost factor (12 in production)
    - Every hash carries its own salt: hashing the same password twice
      yields two different strings that both verify
    - verify() returns False for missing or malformed hashes instead of raising
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Same cost as real hashes, so an unknown email costs one full comparison
        self._dummy_hash = self.hash_sync("dummy_password")

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash_sync(self, plaintext: str) -> str:
        hashed = bcrypt.hashpw(self._encode(plaintext), bcrypt.gensalt(self.rounds))
        return hashed.decode("utf-8")

    def verify_sync(self, plaintext: str, password_hash: Optional[str]) -> bool:
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(self._encode(plaintext), password_hash.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash
            return False

    async def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt"""
        return await asyncio.to_thread(self.hash_sync, plaintext)

    async def verify(self, plaintext: str, password_hash: Optional[str]) -> bool:
        """Check a password against a stored hash (constant-time inside bcrypt)"""
        return await asyncio.to_thread(self.verify_sync, plaintext, password_hash)

    async def dummy_verify(self, plaintext: str) -> None:
        """
        Spend one full bcrypt comparison without a real hash.

        Used when no account matched so that an unknown email takes as long
        as a wrong password.
        """
        await self.verify(plaintext, self._dummy_hash)
