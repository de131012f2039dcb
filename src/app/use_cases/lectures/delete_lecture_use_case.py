"""
Delete Lecture Use Case

Marks a lecture deleted. The row is kept and stays fetchable.
"""

import logging
from datetime import datetime
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import LectureResponse

logger = logging.getLogger(__name__)


class DeleteLectureUseCase:
    """
    Use case for deleting a lecture.

    Idempotent: deleting an already deleted lecture succeeds and keeps the
    original deleted_at.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, lecture_id: UUID) -> Result[LectureResponse]:
        async with self.uow:
            lecture = await self.uow.lectures.get_by_id(lecture_id)
            if lecture is None:
                return Return.err(Error("LECTURE_NOT_FOUND", "Lecture not found"))

            if not lecture.deleted:
                lecture.deleted = True
                lecture.deleted_at = datetime.utcnow()
                lecture = await self.uow.lectures.update(lecture)
                await self.uow.commit()
                logger.info(f"Lecture {lecture.id} deleted")

            return Return.ok(LectureResponse.from_entity(lecture))
