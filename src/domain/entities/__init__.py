"""
Course Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    Authority,
    EnrollmentStatus,
    Grade,
    LectureState,
    PaymentStatus,
)

# Export all entities
from .member import Member
from .lecture import Lecture
from .enrollment import Enrollment
from .lecture_member import LectureMember
from .payment import Payment
from .order import Order

__all__ = [
    # Enums
    "Authority",
    "EnrollmentStatus",
    "Grade",
    "LectureState",
    "PaymentStatus",
    # Entities
    "Member",
    "Lecture",
    "Enrollment",
    "LectureMember",
    "Payment",
    "Order",
]
