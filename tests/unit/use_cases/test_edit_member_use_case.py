from uuid import uuid4

import bcrypt
import pytest

from src.api.utils.jwt import verify_jwt
from src.app.use_cases.members import EditMemberUseCase
from src.domain.entities import Member


def make_member():
    return Member(
        id=uuid4(),
        email="member@example.com",
        name="Before",
        password_hash=bcrypt.hashpw(b"OldPass123!", bcrypt.gensalt(rounds=4)).decode("utf-8"),
    )


@pytest.mark.asyncio
async def test_password_change_reissues_token(mock_uow):
    """A fresh access token for the same member comes back with the edit"""
    # Arrange
    member = make_member()
    mock_uow.members.get_by_id.return_value = member

    # Act
    result = await EditMemberUseCase(mock_uow).execute(member.id, password="NewPass123!")

    # Assert
    assert result.is_ok()
    assert bcrypt.checkpw(b"NewPass123!", member.password_hash.encode("utf-8"))

    payload = verify_jwt(result.value.access_token)
    assert payload is not None
    assert payload["member_id"] == str(member.id)
    assert payload["authority"] == "ROLE_USER"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_name_change_keeps_password(mock_uow):
    member = make_member()
    old_hash = member.password_hash
    mock_uow.members.get_by_id.return_value = member

    result = await EditMemberUseCase(mock_uow).execute(member.id, name="After")

    assert result.is_ok()
    assert result.value.member.name == "After"
    assert member.password_hash == old_hash


@pytest.mark.asyncio
async def test_short_password_rejected(mock_uow):
    result = await EditMemberUseCase(mock_uow).execute(uuid4(), password="short")

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    mock_uow.members.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_member_not_found(mock_uow):
    mock_uow.members.get_by_id.return_value = None

    result = await EditMemberUseCase(mock_uow).execute(uuid4(), name="Nobody")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
