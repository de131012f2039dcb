"""
Course Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Grade(str, Enum):
    """Member subscription tier"""

    Freetier = "Freetier"
    Premium = "Premium"


class Authority(str, Enum):
    """Member authority role"""

    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"


class LectureState(str, Enum):
    """Lecture lifecycle state"""

    WAITING = "WAITING"
    ONGOING = "ONGOING"
    ENDED = "ENDED"


class EnrollmentStatus(str, Enum):
    """Enrollment approval status"""

    WAITING = "WAITING"
    ACCEPTED = "ACCEPTED"
    CANCELLED = "CANCELLED"
    REJECTED = "REJECTED"


class PaymentStatus(str, Enum):
    """Payment status"""

    READY = "READY"
    OK = "OK"
    CANCEL = "CANCEL"
