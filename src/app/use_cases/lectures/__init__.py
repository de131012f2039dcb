"""
Lecture Use Cases

Quota-guarded creation plus modify, delete and fetch.
"""

from .create_lecture_use_case import CreateLectureUseCase
from .delete_lecture_use_case import DeleteLectureUseCase
from .dtos import (
    LectureCreationRequest,
    LectureModificationRequest,
    LectureQueryFilter,
    LectureResponse,
)
from .get_lecture_use_case import GetLectureUseCase
from .modify_lecture_use_case import ModifyLectureUseCase

__all__ = [
    "CreateLectureUseCase",
    "ModifyLectureUseCase",
    "DeleteLectureUseCase",
    "GetLectureUseCase",
    "LectureCreationRequest",
    "LectureModificationRequest",
    "LectureQueryFilter",
    "LectureResponse",
]
