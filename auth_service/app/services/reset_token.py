"""
Reset Token Codec

Issues password reset secrets and derives the fingerprint that is stored in
place of the secret.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from auth_service.domain.base import utcnow


@dataclass(frozen=True)
class IssuedResetToken:
    secret: str  # goes to the user, never stored
    fingerprint: str  # stored, never sent
    expires_at: datetime


class ResetTokenCodec:
    """
    Password reset token generation.

    Business Rules:
    - Secret is 32 random bytes from the OS CSPRNG (256 bits), hex encoded
    - Fingerprint is the SHA-256 hex digest of the secret; a fast digest is
      enough because the secret itself carries full entropy
    - Token expires one hour after issuance
    """

    def __init__(self, ttl: timedelta = timedelta(hours=1)):
        self.ttl = ttl

    @staticmethod
    def fingerprint(secret: str) -> str:
        return hashlib.sha256(secret.encode("utf-8")).hexdigest()

    def issue(self, now: Optional[datetime] = None) -> IssuedResetToken:
        secret = secrets.token_hex(32)
        issued_at = now or utcnow()
        return IssuedResetToken(
            secret=secret,
            fingerprint=self.fingerprint(secret),
            expires_at=issued_at + self.ttl,
        )

    def matches(self, secret: str, fingerprint: str) -> bool:
        return hmac.compare_digest(self.fingerprint(secret), fingerprint)
