from datetime import datetime

import pytest
from unittest.mock import AsyncMock, MagicMock

FROZEN_NOW = datetime(2025, 3, 1, 12, 0, 0)


@pytest.fixture
def now():
    return FROZEN_NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Account stores searched by the identity resolver
    for store in ("students", "admins", "organizations"):
        repo = MagicMock()
        repo.find_by_recovery_email = AsyncMock(return_value=None)
        repo.set_password_hash = AsyncMock(return_value=True)
        setattr(uow, store, repo)

    uow.reset_requests = MagicMock()
    uow.reset_requests.create = AsyncMock(side_effect=lambda request: request)
    uow.reset_requests.delete_by_email = AsyncMock(return_value=0)
    uow.reset_requests.get_by_token = AsyncMock(return_value=None)
    uow.reset_requests.get_latest_by_email = AsyncMock(return_value=None)
    uow.reset_requests.transition = AsyncMock(return_value=False)
    uow.reset_requests.expire_if_stale = AsyncMock(return_value=False)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=lambda event: event)

    return uow
