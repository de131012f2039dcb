"""
Member Entity

Represents a person who owns lectures and joins other members' lectures.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import Authority, Grade


class Member(SQLModel, table=True):
    """
    Member entity.

    Business Rules:
    - Email must be unique across all members
    - Password stored as bcrypt hash (cost factor 12)
    - Freetier members may own at most 3 active lectures
    - A successful payment upgrades grade to Premium
    """

    __tablename__ = "members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=100)
    password_hash: str = Field(max_length=60)

    grade: Grade = Field(default=Grade.Freetier)
    authority: Authority = Field(default=Authority.ROLE_USER)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_member_grade", "grade"),)

    def premium(self) -> None:
        self.grade = Grade.Premium
        self.updated_at = datetime.utcnow()
