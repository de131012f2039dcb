from abc import ABC, abstractmethod
from uuid import UUID

from src.domain.entities import LectureMember


class ILectureMemberRepository(ABC):
    """LectureMember repository interface - application layer"""

    @abstractmethod
    async def exists_active(self, member_id: UUID, lecture_id: UUID) -> bool:
        """Check whether member currently belongs to lecture"""
        pass

    @abstractmethod
    async def create(self, lecture_member: LectureMember) -> LectureMember:
        """
        Create a new lecture membership.

        Raises:
            DuplicateEntryError: member already belongs to lecture
        """
        pass
