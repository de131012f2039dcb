"""
Lecture Use Case DTOs (Data Transfer Objects)

All Command and Response classes for lecture domain.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import Lecture


# ============================================================================
# Command DTOs
# ============================================================================


class LectureCreationRequest(BaseModel):
    """Command for create lecture use case"""

    title: str = Field(..., min_length=1, max_length=255)


class LectureModificationRequest(BaseModel):
    """Command for modify lecture use case"""

    lecture_id: UUID
    title: str = Field(..., min_length=1, max_length=255)


class LectureQueryFilter(BaseModel):
    """Selects the lectures a quota applies to"""

    owner_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class LectureResponse(BaseModel):
    """Lecture returned by lecture use cases"""

    id: str
    title: str
    owner_id: str
    state: str
    deleted: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, lecture: Lecture) -> "LectureResponse":
        return cls(
            id=str(lecture.id),
            title=lecture.title,
            owner_id=str(lecture.owner_id),
            state=lecture.state.value,
            deleted=lecture.deleted,
            created_at=lecture.created_at,
            updated_at=lecture.updated_at,
            deleted_at=lecture.deleted_at,
        )
