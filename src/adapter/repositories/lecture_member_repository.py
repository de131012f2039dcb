from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateEntryError
from src.app.repositories.lecture_member_repository import ILectureMemberRepository
from src.domain.entities import LectureMember


class LectureMemberRepository(ILectureMemberRepository):
    """LectureMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists_active(self, member_id: UUID, lecture_id: UUID) -> bool:
        """Check whether member currently belongs to lecture"""
        stmt = select(LectureMember.id).where(
            LectureMember.member_id == member_id,
            LectureMember.lecture_id == lecture_id,
            LectureMember.deleted == False,
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, lecture_member: LectureMember) -> LectureMember:
        """Create a new lecture membership"""
        self.session.add(lecture_member)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntryError("uq_lecture_member_active") from e
        await self.session.refresh(lecture_member)
        return lecture_member
