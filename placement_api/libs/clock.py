from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current UTC time without tzinfo, matching the naive DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)
