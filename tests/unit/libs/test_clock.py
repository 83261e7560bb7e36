from datetime import UTC, datetime, timedelta

from placement_api.domain.entities import AccountKind, ResetRequest
from placement_api.libs.clock import utcnow


def test_utcnow_is_naive_utc():
    now = utcnow()

    assert now.tzinfo is None
    assert abs(datetime.now(UTC).replace(tzinfo=None) - now) < timedelta(seconds=5)


def test_entity_timestamps_default_to_naive_utc():
    request = ResetRequest(
        email="asha@example.com",
        token="c" * 64,
        account_kind=AccountKind.student,
        expires_at=utcnow() + timedelta(minutes=10),
    )

    assert request.issued_at.tzinfo is None
    assert request.issued_at < request.expires_at
