"""
Edit Member Use Case

Handles profile edits, including password changes.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import create_access_token
from src.app.services.unit_of_work import UnitOfWork

from .dtos import EditMemberResponse, MemberInfo

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class EditMemberUseCase:
    """
    Use case for editing the caller's profile.

    Business Rules:
    - Member must exist
    - Password must be at least 8 characters, stored as bcrypt hash
    - A new access token is issued after every edit so the caller's session
      stays valid across a credential change
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        member_id: UUID,
        name: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Result[EditMemberResponse]:
        """
        Execute edit member use case.

        Args:
            member_id: Member being edited (the caller)
            name: New display name, unchanged when None
            password: New password, unchanged when None

        Returns:
            Result with EditMemberResponse DTO, or Error
        """
        if password is not None and len(password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )

        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("USER_NOT_FOUND", "Member not found"))

            if name is not None:
                member.name = name

            if password is not None:
                member.password_hash = bcrypt.hashpw(
                    password.encode("utf-8"), bcrypt.gensalt(rounds=12)
                ).decode("utf-8")

            member.updated_at = datetime.utcnow()
            member = await self.uow.members.update(member)

            await self.uow.commit()

            if password is not None:
                logger.info(f"Password changed for member {member.id}")

            access_token = create_access_token(
                member_id=str(member.id),
                authority=member.authority.value,
            )

            return Return.ok(
                EditMemberResponse(
                    access_token=access_token,
                    member=MemberInfo(
                        id=str(member.id),
                        email=member.email,
                        name=member.name,
                        grade=member.grade.value,
                    ),
                )
            )
