"""
Enrollment Entity

A member's request to join a lecture, with an approval lifecycle.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import EnrollmentStatus


class Enrollment(SQLModel, table=True):
    """
    Enrollment entity - links an applicant to a lecture.

    Business Rules:
    - WAITING -> ACCEPTED | CANCELLED | REJECTED, terminal states are final
    - At most one WAITING enrollment per (member_id, lecture_id)
    - modified_by is the applicant on cancel, the lecture owner on confirm
    - Rows are never deleted
    """

    __tablename__ = "enrollments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    lecture_id: UUID = Field(foreign_key="lectures.id", nullable=False, index=True)
    member_id: UUID = Field(foreign_key="members.id", nullable=False, index=True)

    status: EnrollmentStatus = Field(default=EnrollmentStatus.WAITING)
    modified_by: UUID = Field(foreign_key="members.id", nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "uq_enrollment_waiting_member_lecture",
            "member_id",
            "lecture_id",
            unique=True,
            sqlite_where=text("status = 'WAITING'"),
            postgresql_where=text("status = 'WAITING'"),
        ),
        Index("idx_enrollment_status", "status"),
    )
