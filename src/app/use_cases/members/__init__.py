"""
Member Use Cases
"""

from .dtos import EditMemberResponse, MemberInfo
from .edit_member_use_case import EditMemberUseCase

__all__ = [
    "EditMemberUseCase",
    "EditMemberResponse",
    "MemberInfo",
]
