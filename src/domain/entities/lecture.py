"""
Lecture Entity

A course owned by exactly one member.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import LectureState


class Lecture(SQLModel, table=True):
    """
    Lecture entity.

    Business Rules:
    - Owned by exactly one member (owner_id required)
    - Created in WAITING state through the lecture quota guard
    - Deletion sets the deleted flag; rows are never removed
    """

    __tablename__ = "lectures"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    owner_id: UUID = Field(foreign_key="members.id", nullable=False, index=True)

    state: LectureState = Field(default=LectureState.WAITING)
    deleted: bool = Field(default=False)
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_lecture_owner_deleted", "owner_id", "deleted"),)
