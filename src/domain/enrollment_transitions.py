"""
Enrollment State Machine

Pure transition rules over an immutable enrollment snapshot. Nothing here
touches storage: callers persist the returned EnrollmentTransition with a
conditional update on from_status.

    WAITING -> ACCEPTED | CANCELLED | REJECTED
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Union
from uuid import UUID

from libs.result import Error, Result, Return
from src.domain.entities import Enrollment, EnrollmentStatus

TRANSITIONS: Dict[EnrollmentStatus, FrozenSet[EnrollmentStatus]] = {
    EnrollmentStatus.WAITING: frozenset(
        {
            EnrollmentStatus.ACCEPTED,
            EnrollmentStatus.CANCELLED,
            EnrollmentStatus.REJECTED,
        }
    ),
    EnrollmentStatus.ACCEPTED: frozenset(),
    EnrollmentStatus.CANCELLED: frozenset(),
    EnrollmentStatus.REJECTED: frozenset(),
}

CONFIRM_ACTIONS = frozenset({EnrollmentStatus.ACCEPTED, EnrollmentStatus.REJECTED})


@dataclass(frozen=True)
class EnrollmentSnapshot:
    """Read-only view of an enrollment and the owner of its lecture"""

    id: UUID
    lecture_id: UUID
    member_id: UUID
    lecture_owner_id: UUID
    status: EnrollmentStatus

    @classmethod
    def of(cls, enrollment: Enrollment, lecture_owner_id: UUID) -> "EnrollmentSnapshot":
        return cls(
            id=enrollment.id,
            lecture_id=enrollment.lecture_id,
            member_id=enrollment.member_id,
            lecture_owner_id=lecture_owner_id,
            status=enrollment.status,
        )


@dataclass(frozen=True)
class EnrollmentTransition:
    """A status change to be applied by the repository"""

    enrollment_id: UUID
    from_status: EnrollmentStatus
    to_status: EnrollmentStatus
    modified_by: UUID


def is_terminal(status: EnrollmentStatus) -> bool:
    return not TRANSITIONS[status]


def parse_confirm_action(action: Union[str, EnrollmentStatus]) -> Result[EnrollmentStatus]:
    try:
        status = EnrollmentStatus(action)
    except ValueError:
        status = None

    if status not in CONFIRM_ACTIONS:
        return Return.err(
            Error(
                "INVALID_ENROLLMENT_ACTION",
                f"Invalid action: {action}. Must be one of: ACCEPTED, REJECTED",
            )
        )
    return Return.ok(status)


def transition(
    snapshot: EnrollmentSnapshot, to_status: EnrollmentStatus, modified_by: UUID
) -> Result[EnrollmentTransition]:
    if to_status not in TRANSITIONS[snapshot.status]:
        # Already processed: from the caller's view the waiting request is gone
        return Return.err(
            Error(
                "ENROLLMENT_NOT_FOUND",
                "No waiting enrollment request was found",
            )
        )
    return Return.ok(
        EnrollmentTransition(
            enrollment_id=snapshot.id,
            from_status=snapshot.status,
            to_status=to_status,
            modified_by=modified_by,
        )
    )


def cancel(snapshot: EnrollmentSnapshot, member_id: UUID) -> Result[EnrollmentTransition]:
    """Applicant withdraws their own waiting request"""
    if snapshot.member_id != member_id:
        return Return.err(
            Error("ENROLLMENT_NOT_FOUND", "No waiting enrollment request was found")
        )
    return transition(snapshot, EnrollmentStatus.CANCELLED, member_id)


def confirm(
    snapshot: EnrollmentSnapshot, tutor_id: UUID, action: EnrollmentStatus
) -> Result[EnrollmentTransition]:
    """Lecture owner accepts or rejects a waiting request"""
    if action not in CONFIRM_ACTIONS:
        return parse_confirm_action(action)
    if snapshot.lecture_owner_id != tutor_id:
        return Return.err(
            Error("ENROLLMENT_NOT_FOUND", "No waiting enrollment request was found")
        )
    return transition(snapshot, action, tutor_id)
