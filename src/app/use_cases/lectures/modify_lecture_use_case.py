"""
Modify Lecture Use Case
"""

from datetime import datetime

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import LectureModificationRequest, LectureResponse


class ModifyLectureUseCase:
    """Use case for changing a lecture's title"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, request: LectureModificationRequest) -> Result[LectureResponse]:
        async with self.uow:
            lecture = await self.uow.lectures.get_by_id(request.lecture_id)
            if lecture is None:
                return Return.err(Error("LECTURE_NOT_FOUND", "Lecture not found"))

            lecture.title = request.title
            lecture.updated_at = datetime.utcnow()
            lecture = await self.uow.lectures.update(lecture)

            await self.uow.commit()

            return Return.ok(LectureResponse.from_entity(lecture))
