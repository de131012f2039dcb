"""
LectureMember Entity

Durable membership of a member in a lecture, created on enrollment acceptance.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class LectureMember(SQLModel, table=True):
    """
    LectureMember entity.

    Business Rules:
    - Created once per (member_id, lecture_id) when an enrollment is accepted
    - At most one non-deleted row per (member_id, lecture_id)
    """

    __tablename__ = "lecture_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    lecture_id: UUID = Field(foreign_key="lectures.id", nullable=False, index=True)
    member_id: UUID = Field(foreign_key="members.id", nullable=False, index=True)

    deleted: bool = Field(default=False)
    modified_by: UUID = Field(foreign_key="members.id", nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index(
            "uq_lecture_member_active",
            "member_id",
            "lecture_id",
            unique=True,
            sqlite_where=text("deleted = false"),
            postgresql_where=text("deleted = false"),
        ),
    )
