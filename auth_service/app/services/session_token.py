"""
Session Token Service

Issues and verifies the HS256 bearer tokens that authorize protected
operations.
"""

from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt
from jose.utils import base64url_decode, base64url_encode

from auth_service.libs.result import Error, Result, Return

ALGORITHM = "HS256"


def _has_canonical_signature(token: str) -> bool:
    # base64 ignores the spare low bits of the last character, so a signature
    # with those bits flipped would still decode to the same bytes
    try:
        segments = token.encode("ascii").split(b".")
    except UnicodeEncodeError:
        return False
    if len(segments) != 3:
        return False
    signature = segments[2]
    try:
        return base64url_encode(base64url_decode(signature)) == signature
    except ValueError:
        return False


class SessionTokenService:
    """
    Signed, time-limited bearer credential.

    Business Rules:
    - Claims are sub (user id), iat and exp; nothing else is trusted
    - exp is exactly one hour after iat by default
    - Signing key is fixed for the life of the process
    """

    def __init__(self, secret: str, expires_delta: timedelta = timedelta(hours=1)):
        if not secret:
            raise ValueError("Session token secret must not be empty")
        self._secret = secret
        self.expires_delta = expires_delta

    def issue(self, user_id: UUID, now: Optional[datetime] = None) -> str:
        """
        Generate a session token

        Args:
            user_id: User UUID
            now: Issuance time (defaults to current UTC time)

        Returns:
            JWT token string (HS256)
        """
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Result[UUID]:
        """
        Verify a session token and extract the user id

        Returns:
            Result with the user UUID, or Error(TOKEN_EXPIRED) for a
            well-signed token past its expiry, or Error(INVALID_TOKEN) for
            anything else
        """
        if not _has_canonical_signature(token):
            return Return.err(Error("INVALID_TOKEN", "Invalid session token"))

        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError:
            return Return.err(Error("TOKEN_EXPIRED", "Session token has expired"))
        except JWTError:
            return Return.err(Error("INVALID_TOKEN", "Invalid session token"))

        try:
            return Return.ok(UUID(payload["sub"]))
        except (KeyError, TypeError, ValueError):
            return Return.err(Error("INVALID_TOKEN", "Invalid session token"))

    @property
    def expires_in(self) -> int:
        return int(self.expires_delta.total_seconds())
