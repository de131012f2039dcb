import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.members = MagicMock()
    uow.members.get_by_id = AsyncMock()
    uow.members.get_by_id_for_update = AsyncMock()
    uow.members.update = AsyncMock(side_effect=lambda member: member)

    uow.lectures = MagicMock()
    uow.lectures.get_by_id = AsyncMock()
    uow.lectures.count_active_by_owner = AsyncMock(return_value=0)
    uow.lectures.create = AsyncMock(side_effect=lambda lecture: lecture)
    uow.lectures.update = AsyncMock(side_effect=lambda lecture: lecture)

    uow.enrollments = MagicMock()
    uow.enrollments.get_snapshot = AsyncMock()
    uow.enrollments.exists_waiting = AsyncMock(return_value=False)
    uow.enrollments.create = AsyncMock(side_effect=lambda enrollment: enrollment)
    uow.enrollments.apply_transition = AsyncMock(return_value=True)

    uow.lecture_members = MagicMock()
    uow.lecture_members.exists_active = AsyncMock(return_value=False)
    uow.lecture_members.create = AsyncMock(side_effect=lambda link: link)

    uow.orders = MagicMock()
    uow.orders.get_by_order_uid = AsyncMock()
    uow.orders.delete = AsyncMock()

    uow.payments = MagicMock()
    uow.payments.get_by_id = AsyncMock()
    uow.payments.update = AsyncMock(side_effect=lambda payment: payment)
    uow.payments.delete = AsyncMock()

    return uow
