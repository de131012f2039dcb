"""
Use Cases

Organized into domain folders:
- enrollments/: Join-request workflow
- lectures/: Lecture management and quota guard
- members/: Member profile
- payments/: Payment gateway notifications
"""

from .enrollments import (
    CancelEnrollmentUseCase,
    ConfirmEnrollmentUseCase,
    RequestEnrollmentUseCase,
)
from .lectures import (
    CreateLectureUseCase,
    DeleteLectureUseCase,
    GetLectureUseCase,
    ModifyLectureUseCase,
)
from .members import EditMemberUseCase
from .payments import (
    GetPaymentRequestUseCase,
    PaymentCallbackUseCase,
    ProcessWebhookUseCase,
)

__all__ = [
    # Enrollments
    "RequestEnrollmentUseCase",
    "CancelEnrollmentUseCase",
    "ConfirmEnrollmentUseCase",
    # Lectures
    "CreateLectureUseCase",
    "ModifyLectureUseCase",
    "DeleteLectureUseCase",
    "GetLectureUseCase",
    # Members
    "EditMemberUseCase",
    # Payments
    "GetPaymentRequestUseCase",
    "ProcessWebhookUseCase",
    "PaymentCallbackUseCase",
]
