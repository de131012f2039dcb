from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.lecture_repository import ILectureRepository
from src.domain.entities import Lecture


class LectureRepository(ILectureRepository):
    """Lecture repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, lecture_id: UUID) -> Optional[Lecture]:
        """Get lecture by ID, deleted lectures included"""
        stmt = select(Lecture).where(Lecture.id == lecture_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def count_active_by_owner(self, owner_id: UUID) -> int:
        """Count the owner's lectures that are not deleted"""
        stmt = (
            select(func.count())
            .select_from(Lecture)
            .where(Lecture.owner_id == owner_id, Lecture.deleted == False)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, lecture: Lecture) -> Lecture:
        """Create a new lecture"""
        self.session.add(lecture)
        await self.session.flush()
        await self.session.refresh(lecture)
        return lecture

    async def update(self, lecture: Lecture) -> Lecture:
        """Update existing lecture"""
        self.session.add(lecture)
        await self.session.flush()
        await self.session.refresh(lecture)
        return lecture
