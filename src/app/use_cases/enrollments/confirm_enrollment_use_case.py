"""
Confirm Enrollment Use Case

Handles a lecture owner accepting or rejecting a waiting request.
"""

import logging
from typing import Union
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.membership_linker import MembershipLinker
from src.app.services.unit_of_work import UnitOfWork
from src.domain import enrollment_transitions
from src.domain.entities import EnrollmentStatus

from .dtos import EnrollmentResponse

logger = logging.getLogger(__name__)


class ConfirmEnrollmentUseCase:
    """
    Use case for confirming an enrollment request.

    Business Rules:
    - Action must be ACCEPTED or REJECTED
    - Tutor must exist and own the enrollment's lecture
    - Enrollment must still be WAITING
    - Status becomes the action, modified_by = tutor
    - ACCEPTED links the applicant to the lecture in the same transaction;
      if the applicant already belongs to it nothing is written
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.linker = MembershipLinker(uow)

    async def execute(
        self, enroll_id: UUID, tutor_id: UUID, action: Union[str, EnrollmentStatus]
    ) -> Result[EnrollmentResponse]:
        """
        Execute confirm enrollment use case.

        Args:
            enroll_id: Enrollment to confirm
            tutor_id: Lecture owner making the decision
            action: ACCEPTED or REJECTED

        Returns:
            Result with EnrollmentResponse DTO, or Error
        """
        parsed = enrollment_transitions.parse_confirm_action(action)
        if parsed.is_err():
            return parsed
        to_status = parsed.value

        async with self.uow:
            tutor = await self.uow.members.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(Error("USER_NOT_FOUND", "Member not found"))

            snapshot = await self.uow.enrollments.get_snapshot(enroll_id)
            if snapshot is None:
                return Return.err(
                    Error("ENROLLMENT_NOT_FOUND", "No waiting enrollment request was found")
                )

            transition = enrollment_transitions.confirm(snapshot, tutor.id, to_status)
            if transition.is_err():
                return transition

            applied = await self.uow.enrollments.apply_transition(transition.value)
            if not applied:
                return Return.err(
                    Error("ENROLLMENT_NOT_FOUND", "No waiting enrollment request was found")
                )

            if to_status == EnrollmentStatus.ACCEPTED:
                linked = await self.linker.link(
                    snapshot.member_id, snapshot.lecture_id, tutor.id
                )
                if linked.is_err():
                    # Unit of work rolls back the status change on exit
                    return linked

            await self.uow.commit()

            logger.info(f"Enrollment {enroll_id} {to_status.value} by {tutor.id}")

            return Return.ok(
                EnrollmentResponse(
                    enrollment_id=str(enroll_id),
                    status=to_status.value,
                )
            )
