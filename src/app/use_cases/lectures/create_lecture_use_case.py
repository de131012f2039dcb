"""
Create Lecture Use Case

Creates a lecture while enforcing the owner's grade quota.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.owner_lock import OwnerLockRegistry, lecture_owner_locks
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Lecture, LectureState
from src.domain.lecture_quota import check_lecture_quota

from .dtos import LectureCreationRequest, LectureQueryFilter, LectureResponse

logger = logging.getLogger(__name__)


class CreateLectureUseCase:
    """
    Use case for creating a lecture (lecture quota guard).

    Business Rules:
    - Owner must exist
    - Freetier owners may have at most 3 non-deleted lectures
    - Premium owners are unlimited
    - New lectures start in WAITING state

    Concurrency:
    Count and insert run under the owner's lock from the registry, held
    until after commit, and the owner row is read FOR UPDATE so creators in
    other processes serialize on the database as well.
    """

    def __init__(self, uow: UnitOfWork, owner_locks: Optional[OwnerLockRegistry] = None):
        self.uow = uow
        self.owner_locks = owner_locks or lecture_owner_locks

    async def execute(
        self, request: LectureCreationRequest, filter: LectureQueryFilter
    ) -> Result[LectureResponse]:
        """
        Execute create lecture use case.

        Args:
            request: Lecture title
            filter: Owner the lecture is created for

        Returns:
            Result with LectureResponse DTO, or Error
        """
        async with self.uow:
            async with self.owner_locks.hold(filter.owner_id):
                owner = await self.uow.members.get_by_id_for_update(filter.owner_id)
                if owner is None:
                    return Return.err(Error("USER_NOT_FOUND", "Member not found"))

                active_lectures = await self.uow.lectures.count_active_by_owner(owner.id)
                quota = check_lecture_quota(owner.grade, active_lectures)
                if quota.is_err():
                    logger.warning(
                        f"Lecture quota exceeded for {owner.id}: "
                        f"{active_lectures} active, grade {owner.grade.value}"
                    )
                    return quota

                lecture = await self.uow.lectures.create(
                    Lecture(
                        title=request.title,
                        owner_id=owner.id,
                        state=LectureState.WAITING,
                    )
                )

                await self.uow.commit()

        logger.info(f"Lecture {lecture.id} created by {owner.id}")

        return Return.ok(LectureResponse.from_entity(lecture))
