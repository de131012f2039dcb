from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import LectureResponse


class GetLectureUseCase:
    """Use case for fetching a lecture, deleted lectures included"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, lecture_id: UUID) -> Result[LectureResponse]:
        async with self.uow:
            lecture = await self.uow.lectures.get_by_id(lecture_id)
            if lecture is None:
                return Return.err(Error("LECTURE_NOT_FOUND", "Lecture not found"))

            return Return.ok(LectureResponse.from_entity(lecture))
