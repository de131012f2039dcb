"""
Member Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class MemberInfo(BaseModel):
    """Member details in responses"""

    id: str
    email: str
    name: str
    grade: str


class EditMemberResponse(BaseModel):
    """Response for edit member use case, carries the reissued access token"""

    access_token: str
    member: MemberInfo
