from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError, parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lectures import (
    CreateLectureUseCase,
    DeleteLectureUseCase,
    GetLectureUseCase,
    LectureCreationRequest,
    LectureModificationRequest,
    LectureQueryFilter,
    LectureResponse,
    ModifyLectureUseCase,
)
from src.depends import get_current_member_id, get_unit_of_work

router = APIRouter(prefix="/lectures", tags=["Lecture"])


class LectureTitleRequest(BaseModel):
    """
    Lecture HTTP request payload

    Used for both creation and title modification.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Lecture title")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LectureResponse)
async def create_lecture(
    request: LectureTitleRequest,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Lecture

    Creates a lecture owned by the caller, subject to the caller's grade quota.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: USER_NOT_FOUND
        - 412 Precondition Failed: LECTURE_MEMBER_FREETEER_OVERCOUNT
        - 500 Internal Server Error: Server error
    """
    use_case = CreateLectureUseCase(uow)
    result = await use_case.execute(
        LectureCreationRequest(title=request.title),
        LectureQueryFilter(owner_id=member_id),
    )

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "LECTURE_MEMBER_FREETEER_OVERCOUNT":
            raise ClientError(error, status_code=status.HTTP_412_PRECONDITION_FAILED)
        raise ServerError(error)

    return result.value


@router.get("/{lecture_id}", status_code=status.HTTP_200_OK, response_model=LectureResponse)
async def get_lecture(
    lecture_id: str,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Lecture

    Deleted lectures are returned with deleted=true.

    Raises:
        - 400 Bad Request: INVALID_LECTURE_ID
        - 404 Not Found: LECTURE_NOT_FOUND
    """
    lecture_uuid = parse_uuid(lecture_id, "INVALID_LECTURE_ID", "lecture ID")

    use_case = GetLectureUseCase(uow)
    result = await use_case.execute(lecture_uuid)

    if result.is_err():
        error = result.error
        if error.code == "LECTURE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.put("/{lecture_id}", status_code=status.HTTP_200_OK, response_model=LectureResponse)
async def modify_lecture(
    lecture_id: str,
    request: LectureTitleRequest,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Modify Lecture

    Raises:
        - 400 Bad Request: INVALID_LECTURE_ID
        - 404 Not Found: LECTURE_NOT_FOUND
    """
    lecture_uuid = parse_uuid(lecture_id, "INVALID_LECTURE_ID", "lecture ID")

    use_case = ModifyLectureUseCase(uow)
    result = await use_case.execute(
        LectureModificationRequest(lecture_id=lecture_uuid, title=request.title)
    )

    if result.is_err():
        error = result.error
        if error.code == "LECTURE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete("/{lecture_id}", status_code=status.HTTP_200_OK, response_model=LectureResponse)
async def delete_lecture(
    lecture_id: str,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Lecture

    Marks the lecture deleted; it no longer counts toward the owner's quota.

    Raises:
        - 400 Bad Request: INVALID_LECTURE_ID
        - 404 Not Found: LECTURE_NOT_FOUND
    """
    lecture_uuid = parse_uuid(lecture_id, "INVALID_LECTURE_ID", "lecture ID")

    use_case = DeleteLectureUseCase(uow)
    result = await use_case.execute(lecture_uuid)

    if result.is_err():
        error = result.error
        if error.code == "LECTURE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
