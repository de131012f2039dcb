from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import EditMemberResponse, EditMemberUseCase
from src.depends import get_current_member_id, get_unit_of_work

router = APIRouter(prefix="/members", tags=["Member"])


class EditMemberRequest(BaseModel):
    """Edit member HTTP request payload"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, description="New password (min 8 chars)")


@router.put("", status_code=status.HTTP_200_OK, response_model=EditMemberResponse)
async def edit_member(
    request: EditMemberRequest,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Edit Member

    Updates the caller's profile and returns a freshly issued access token,
    which replaces the one used for this request.

    Raises:
        - 400 Bad Request: INVALID_PASSWORD
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: USER_NOT_FOUND
    """
    use_case = EditMemberUseCase(uow)
    result = await use_case.execute(member_id, name=request.name, password=request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
