from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Enrollment
from src.domain.enrollment_transitions import EnrollmentSnapshot, EnrollmentTransition


class IEnrollmentRepository(ABC):
    """Enrollment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, enrollment_id: UUID) -> Optional[Enrollment]:
        """Get enrollment by ID"""
        pass

    @abstractmethod
    async def get_snapshot(self, enrollment_id: UUID) -> Optional[EnrollmentSnapshot]:
        """Get enrollment together with the owner of its lecture"""
        pass

    @abstractmethod
    async def exists_waiting(self, member_id: UUID, lecture_id: UUID) -> bool:
        """Check for a WAITING enrollment of member in lecture"""
        pass

    @abstractmethod
    async def create(self, enrollment: Enrollment) -> Enrollment:
        """
        Create a new enrollment.

        Raises:
            DuplicateEntryError: a WAITING enrollment already exists for the pair
        """
        pass

    @abstractmethod
    async def apply_transition(self, transition: EnrollmentTransition) -> bool:
        """
        Apply a status change if the enrollment is still in from_status.

        Returns:
            False when a concurrent operation already changed the status
        """
        pass
