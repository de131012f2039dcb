from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.enrollment_repository import IEnrollmentRepository
from src.app.repositories.errors import DuplicateEntryError
from src.domain.entities import Enrollment, EnrollmentStatus, Lecture
from src.domain.enrollment_transitions import EnrollmentSnapshot, EnrollmentTransition


class EnrollmentRepository(IEnrollmentRepository):
    """Enrollment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, enrollment_id: UUID) -> Optional[Enrollment]:
        """Get enrollment by ID"""
        stmt = select(Enrollment).where(Enrollment.id == enrollment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_snapshot(self, enrollment_id: UUID) -> Optional[EnrollmentSnapshot]:
        """Get enrollment together with the owner of its lecture"""
        stmt = (
            select(Enrollment, Lecture.owner_id)
            .join(Lecture, Lecture.id == Enrollment.lecture_id)
            .where(Enrollment.id == enrollment_id)
        )
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        if row is None:
            return None

        enrollment, owner_id = row
        return EnrollmentSnapshot.of(enrollment, owner_id)

    async def exists_waiting(self, member_id: UUID, lecture_id: UUID) -> bool:
        """Check for a WAITING enrollment of member in lecture"""
        stmt = select(Enrollment.id).where(
            Enrollment.member_id == member_id,
            Enrollment.lecture_id == lecture_id,
            Enrollment.status == EnrollmentStatus.WAITING,
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, enrollment: Enrollment) -> Enrollment:
        """Create a new enrollment"""
        self.session.add(enrollment)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntryError("uq_enrollment_waiting_member_lecture") from e
        await self.session.refresh(enrollment)
        return enrollment

    async def apply_transition(self, transition: EnrollmentTransition) -> bool:
        """Compare-and-set the enrollment status"""
        stmt = (
            update(Enrollment)
            .where(
                Enrollment.id == transition.enrollment_id,
                Enrollment.status == transition.from_status,
            )
            .values(
                status=transition.to_status,
                modified_by=transition.modified_by,
                updated_at=datetime.utcnow(),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
