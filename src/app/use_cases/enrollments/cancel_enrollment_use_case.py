"""
Cancel Enrollment Use Case

Handles an applicant withdrawing their waiting request.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain import enrollment_transitions

from .dtos import EnrollmentResponse

logger = logging.getLogger(__name__)


class CancelEnrollmentUseCase:
    """
    Use case for cancelling an enrollment request.

    Business Rules:
    - Member must exist
    - Only the applicant can cancel, and only while WAITING
    - Status becomes CANCELLED, modified_by = applicant
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, enroll_id: UUID, member_id: UUID) -> Result[EnrollmentResponse]:
        """
        Execute cancel enrollment use case.

        Args:
            enroll_id: Enrollment to cancel
            member_id: Member performing the cancellation

        Returns:
            Result with EnrollmentResponse DTO, or Error
        """
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("USER_NOT_FOUND", "Member not found"))

            snapshot = await self.uow.enrollments.get_snapshot(enroll_id)
            if snapshot is None:
                return Return.err(
                    Error("ENROLLMENT_NOT_FOUND", "No waiting enrollment request was found")
                )

            transition = enrollment_transitions.cancel(snapshot, member.id)
            if transition.is_err():
                return transition

            applied = await self.uow.enrollments.apply_transition(transition.value)
            if not applied:
                return Return.err(
                    Error("ENROLLMENT_NOT_FOUND", "No waiting enrollment request was found")
                )

            await self.uow.commit()

            logger.info(f"Enrollment {enroll_id} cancelled by {member.id}")

            return Return.ok(
                EnrollmentResponse(
                    enrollment_id=str(enroll_id),
                    status=transition.value.to_status.value,
                )
            )
