"""
Membership Linker

Creates the durable Member-Lecture association when an enrollment is
accepted. Runs inside the caller's unit of work; nothing is committed here.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import LectureMember

logger = logging.getLogger(__name__)

ALREADY_JOIN = Error("ALREADY_JOIN", "Member already belongs to this lecture")


class MembershipLinker:
    """
    Guarantees ACCEPTED enrollment => exactly one active LectureMember row.

    The explicit check covers the common case; the partial unique index on
    (member_id, lecture_id) covers concurrent acceptances.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def link(
        self, member_id: UUID, lecture_id: UUID, modified_by: UUID
    ) -> Result[LectureMember]:
        if await self.uow.lecture_members.exists_active(member_id, lecture_id):
            return Return.err(ALREADY_JOIN)

        try:
            lecture_member = await self.uow.lecture_members.create(
                LectureMember(
                    member_id=member_id,
                    lecture_id=lecture_id,
                    deleted=False,
                    modified_by=modified_by,
                )
            )
        except DuplicateEntryError:
            logger.warning(
                "Concurrent join detected for member %s in lecture %s",
                member_id,
                lecture_id,
            )
            return Return.err(ALREADY_JOIN)

        return Return.ok(lecture_member)
