"""
Enrollment Use Cases

Join-request workflow: request, cancel, confirm.
"""

from .cancel_enrollment_use_case import CancelEnrollmentUseCase
from .confirm_enrollment_use_case import ConfirmEnrollmentUseCase
from .dtos import EnrollmentResponse
from .request_enrollment_use_case import RequestEnrollmentUseCase

__all__ = [
    "RequestEnrollmentUseCase",
    "CancelEnrollmentUseCase",
    "ConfirmEnrollmentUseCase",
    "EnrollmentResponse",
]
