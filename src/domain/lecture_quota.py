"""
Lecture quota rules per member grade.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.domain.entities import Grade

FREETIER_MAX_LECTURES = 3

LECTURE_LIMITS = {
    Grade.Freetier: FREETIER_MAX_LECTURES,
    Grade.Premium: None,
}


def lecture_limit(grade: Grade) -> Optional[int]:
    """Maximum number of active lectures, None when unlimited"""
    return LECTURE_LIMITS[grade]


def check_lecture_quota(grade: Grade, active_lectures: int) -> Result[None]:
    limit = lecture_limit(grade)
    if limit is not None and active_lectures >= limit:
        return Return.err(
            Error(
                "LECTURE_MEMBER_FREETEER_OVERCOUNT",
                f"{grade.value} members can own at most {limit} lectures",
            )
        )
    return Return.ok(None)
