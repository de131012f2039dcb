from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError, parse_uuid
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.enrollments import (
    CancelEnrollmentUseCase,
    ConfirmEnrollmentUseCase,
    EnrollmentResponse,
    RequestEnrollmentUseCase,
)
from src.depends import get_current_member_id, get_unit_of_work

router = APIRouter(prefix="/enrollments", tags=["Enrollment"])


class RequestEnrollmentRequest(BaseModel):
    """
    Request enrollment HTTP request payload
    """

    lecture_id: str = Field(..., description="Lecture to join")


class ConfirmEnrollmentRequest(BaseModel):
    """
    Confirm enrollment HTTP request payload
    """

    action: str = Field(..., description="ACCEPTED or REJECTED")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EnrollmentResponse)
async def request_enrollment(
    request: RequestEnrollmentRequest,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request Enrollment

    Asks the lecture owner to let the caller join the lecture.

    Raises:
        - 400 Bad Request: INVALID_LECTURE_ID
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: LECTURE_NOT_FOUND, USER_NOT_FOUND
        - 409 Conflict: ALREADY_ENROLL_REQUEST, ALREADY_JOIN
        - 500 Internal Server Error: Server error
    """
    lecture_uuid = parse_uuid(request.lecture_id, "INVALID_LECTURE_ID", "lecture ID")

    use_case = RequestEnrollmentUseCase(uow)
    result = await use_case.execute(lecture_uuid, member_id)

    if result.is_err():
        error = result.error
        if error.code in ("LECTURE_NOT_FOUND", "USER_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("ALREADY_ENROLL_REQUEST", "ALREADY_JOIN"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/{enroll_id}/cancel",
    status_code=status.HTTP_200_OK,
    response_model=EnrollmentResponse,
)
async def cancel_enrollment(
    enroll_id: str,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Cancel Enrollment

    Withdraws the caller's own waiting request.

    Raises:
        - 400 Bad Request: INVALID_ENROLLMENT_ID
        - 404 Not Found: USER_NOT_FOUND, ENROLLMENT_NOT_FOUND
    """
    enroll_uuid = parse_uuid(enroll_id, "INVALID_ENROLLMENT_ID", "enrollment ID")

    use_case = CancelEnrollmentUseCase(uow)
    result = await use_case.execute(enroll_uuid, member_id)

    if result.is_err():
        error = result.error
        if error.code in ("USER_NOT_FOUND", "ENROLLMENT_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/{enroll_id}/confirm",
    status_code=status.HTTP_200_OK,
    response_model=EnrollmentResponse,
)
async def confirm_enrollment(
    enroll_id: str,
    request: ConfirmEnrollmentRequest,
    tutor_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirm Enrollment

    Lecture owner accepts or rejects a waiting request. Accepting adds the
    applicant to the lecture.

    Raises:
        - 400 Bad Request: INVALID_ENROLLMENT_ID, INVALID_ENROLLMENT_ACTION
        - 404 Not Found: USER_NOT_FOUND, ENROLLMENT_NOT_FOUND
        - 409 Conflict: ALREADY_JOIN
    """
    enroll_uuid = parse_uuid(enroll_id, "INVALID_ENROLLMENT_ID", "enrollment ID")

    use_case = ConfirmEnrollmentUseCase(uow)
    result = await use_case.execute(enroll_uuid, tutor_id, request.action)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ENROLLMENT_ACTION":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("USER_NOT_FOUND", "ENROLLMENT_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "ALREADY_JOIN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
