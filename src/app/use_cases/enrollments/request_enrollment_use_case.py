"""
Request Enrollment Use Case

Handles a member asking to join a lecture.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Enrollment, EnrollmentStatus

from .dtos import EnrollmentResponse

logger = logging.getLogger(__name__)


class RequestEnrollmentUseCase:
    """
    Use case for requesting to join a lecture.

    Business Rules:
    - Lecture must exist and not be deleted
    - Member must exist
    - Only one WAITING request per (member, lecture)
    - Members already in the lecture cannot request again
    - New enrollment starts WAITING, modified_by = applicant
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, lecture_id: UUID, member_id: UUID) -> Result[EnrollmentResponse]:
        """
        Execute request enrollment use case.

        Args:
            lecture_id: Lecture to join
            member_id: Applicant member ID

        Returns:
            Result with EnrollmentResponse DTO, or Error
        """
        async with self.uow:
            lecture = await self.uow.lectures.get_by_id(lecture_id)
            if lecture is None or lecture.deleted:
                return Return.err(Error("LECTURE_NOT_FOUND", "Lecture not found"))

            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("USER_NOT_FOUND", "Member not found"))

            if await self.uow.enrollments.exists_waiting(member.id, lecture.id):
                return Return.err(
                    Error(
                        "ALREADY_ENROLL_REQUEST",
                        "A waiting enrollment request already exists for this lecture",
                    )
                )

            if await self.uow.lecture_members.exists_active(member.id, lecture.id):
                return Return.err(
                    Error("ALREADY_JOIN", "Member already belongs to this lecture")
                )

            try:
                enrollment = await self.uow.enrollments.create(
                    Enrollment(
                        lecture_id=lecture.id,
                        member_id=member.id,
                        status=EnrollmentStatus.WAITING,
                        modified_by=member.id,
                    )
                )
            except DuplicateEntryError:
                return Return.err(
                    Error(
                        "ALREADY_ENROLL_REQUEST",
                        "A waiting enrollment request already exists for this lecture",
                    )
                )

            await self.uow.commit()

            logger.info(
                f"Enrollment {enrollment.id} requested by {member.id} for lecture {lecture.id}"
            )

            return Return.ok(
                EnrollmentResponse(
                    enrollment_id=str(enrollment.id),
                    status=EnrollmentStatus.WAITING.value,
                )
            )
