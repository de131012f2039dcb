from uuid import uuid4

import pytest

from src.app.use_cases.enrollments import CancelEnrollmentUseCase
from src.domain.enrollment_transitions import EnrollmentSnapshot
from src.domain.entities import EnrollmentStatus, Member


def make_member():
    return Member(id=uuid4(), email="student@example.com", name="Student", password_hash="x")


def make_snapshot(member_id, status=EnrollmentStatus.WAITING):
    return EnrollmentSnapshot(
        id=uuid4(),
        lecture_id=uuid4(),
        member_id=member_id,
        lecture_owner_id=uuid4(),
        status=status,
    )


@pytest.mark.asyncio
async def test_successful_cancel(mock_uow):
    """Applicant cancels their own waiting request"""
    # Arrange
    member = make_member()
    snapshot = make_snapshot(member.id)
    mock_uow.members.get_by_id.return_value = member
    mock_uow.enrollments.get_snapshot.return_value = snapshot

    # Act
    result = await CancelEnrollmentUseCase(mock_uow).execute(snapshot.id, member.id)

    # Assert
    assert result.is_ok()
    assert result.value.enrollment_id == str(snapshot.id)
    assert result.value.status == "CANCELLED"

    transition = mock_uow.enrollments.apply_transition.call_args.args[0]
    assert transition.from_status == EnrollmentStatus.WAITING
    assert transition.to_status == EnrollmentStatus.CANCELLED
    assert transition.modified_by == member.id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_member_not_found(mock_uow):
    mock_uow.members.get_by_id.return_value = None

    result = await CancelEnrollmentUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_enrollment_not_found(mock_uow):
    mock_uow.members.get_by_id.return_value = make_member()
    mock_uow.enrollments.get_snapshot.return_value = None

    result = await CancelEnrollmentUseCase(mock_uow).execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "ENROLLMENT_NOT_FOUND"
    mock_uow.enrollments.apply_transition.assert_not_called()


@pytest.mark.asyncio
async def test_cannot_cancel_other_members_request(mock_uow):
    member = make_member()
    mock_uow.members.get_by_id.return_value = member
    mock_uow.enrollments.get_snapshot.return_value = make_snapshot(uuid4())

    result = await CancelEnrollmentUseCase(mock_uow).execute(uuid4(), member.id)

    assert result.is_err()
    assert result.error.code == "ENROLLMENT_NOT_FOUND"
    mock_uow.enrollments.apply_transition.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status",
    [EnrollmentStatus.ACCEPTED, EnrollmentStatus.CANCELLED, EnrollmentStatus.REJECTED],
)
async def test_cannot_cancel_processed_request(mock_uow, status):
    member = make_member()
    mock_uow.members.get_by_id.return_value = member
    mock_uow.enrollments.get_snapshot.return_value = make_snapshot(member.id, status)

    result = await CancelEnrollmentUseCase(mock_uow).execute(uuid4(), member.id)

    assert result.is_err()
    assert result.error.code == "ENROLLMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_lost_race_is_not_found(mock_uow):
    """Status changed between read and conditional update"""
    member = make_member()
    mock_uow.members.get_by_id.return_value = member
    mock_uow.enrollments.get_snapshot.return_value = make_snapshot(member.id)
    mock_uow.enrollments.apply_transition.return_value = False

    result = await CancelEnrollmentUseCase(mock_uow).execute(uuid4(), member.id)

    assert result.is_err()
    assert result.error.code == "ENROLLMENT_NOT_FOUND"
    mock_uow.commit.assert_not_called()
