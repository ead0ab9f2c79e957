from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column in this schema stores."""
    return datetime.now(UTC).replace(tzinfo=None)
