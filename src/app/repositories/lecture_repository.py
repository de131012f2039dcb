from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Lecture


class ILectureRepository(ABC):
    """Lecture repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, lecture_id: UUID) -> Optional[Lecture]:
        """Get lecture by ID, deleted lectures included"""
        pass

    @abstractmethod
    async def count_active_by_owner(self, owner_id: UUID) -> int:
        """Count the owner's lectures that are not deleted"""
        pass

    @abstractmethod
    async def create(self, lecture: Lecture) -> Lecture:
        """Create a new lecture"""
        pass

    @abstractmethod
    async def update(self, lecture: Lecture) -> Lecture:
        """Update existing lecture"""
        pass
