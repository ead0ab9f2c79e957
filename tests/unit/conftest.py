from datetime import timedelta

import pytest
from unittest.mock import AsyncMock, MagicMock

from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.app.services.reset_token import ResetTokenCodec
from auth_service.app.services.session_token import SessionTokenService


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_username = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_reset_token_hash = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update_password = AsyncMock()
    uow.users.set_reset_token = AsyncMock()
    uow.users.complete_onboarding = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def session_tokens():
    return SessionTokenService("unit-test-secret", expires_delta=timedelta(hours=1))


@pytest.fixture
def reset_tokens():
    return ResetTokenCodec(ttl=timedelta(hours=1))
