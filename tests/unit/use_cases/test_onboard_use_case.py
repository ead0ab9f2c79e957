from uuid import uuid4

import pytest

from auth_service.app.repositories.errors import DuplicateUsernameError
from auth_service.app.use_cases.users import OnboardCommand, OnboardUseCase
from auth_service.domain.entities import User


@pytest.fixture
def user():
    return User(id=uuid4(), email="a@x.com", password_hash="hashed_password")


@pytest.mark.asyncio
async def test_successful_onboarding(mock_uow, user):
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.get_by_username.return_value = None

    use_case = OnboardUseCase(mock_uow)
    result = await use_case.execute(user.id, OnboardCommand(name="Alice", username="alice"))

    assert result.is_ok()
    assert result.value.message == "Onboarding completed successfully!"
    mock_uow.users.get_by_username.assert_called_once_with("alice", exclude_user_id=user.id)
    mock_uow.users.complete_onboarding.assert_called_once_with(user.id, "Alice", "alice")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_username_taken_by_another_user(mock_uow, user):
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.get_by_username.return_value = User(
        id=uuid4(), email="b@x.com", password_hash="hashed_password", username="alice"
    )

    use_case = OnboardUseCase(mock_uow)
    result = await use_case.execute(user.id, OnboardCommand(name="Bob", username="alice"))

    assert result.is_err()
    assert result.error.code == "USERNAME_TAKEN"
    mock_uow.users.complete_onboarding.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_constraint_violation_on_write_is_username_taken(mock_uow, user):
    """Two requests can both pass the pre-check; the unique index decides"""
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.get_by_username.return_value = None
    mock_uow.users.complete_onboarding.side_effect = DuplicateUsernameError("alice")

    use_case = OnboardUseCase(mock_uow)
    result = await use_case.execute(user.id, OnboardCommand(name="Alice", username="alice"))

    assert result.is_err()
    assert result.error.code == "USERNAME_TAKEN"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_resubmitting_own_username_succeeds(mock_uow, user):
    user.username = "alice"
    user.onboarded = True
    mock_uow.users.get_by_id.return_value = user
    # The user's own row is excluded from the lookup
    mock_uow.users.get_by_username.return_value = None

    use_case = OnboardUseCase(mock_uow)
    result = await use_case.execute(user.id, OnboardCommand(name="Alice B", username="alice"))

    assert result.is_ok()


@pytest.mark.asyncio
async def test_user_not_found(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    use_case = OnboardUseCase(mock_uow)
    result = await use_case.execute(uuid4(), OnboardCommand(name="A", username="a"))

    assert result.error.code == "USER_NOT_FOUND"
