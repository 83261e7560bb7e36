from datetime import datetime, timezone
from typing import Optional

from placement_api.libs.result import Error, Result, Return


def parse_date(value: Optional[str], field: str) -> Result[Optional[datetime]]:
    """Parse an ISO 8601 date or datetime string into naive UTC; empty means unset"""
    if not value:
        return Return.ok(None)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return Return.err(Error("INVALID_DATE", f"Invalid {field} format"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return Return.ok(parsed)


def check_date_range(start: Optional[datetime], end: Optional[datetime]) -> Result[None]:
    if start and end and start > end:
        return Return.err(Error("INVALID_DATE_RANGE", "start_date must be before end_date"))
    return Return.ok(None)
