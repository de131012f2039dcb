"""
Enrollment Use Case DTOs (Data Transfer Objects)

All Command and Response classes for enrollment domain.
"""

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class EnrollmentResponse(BaseModel):
    """Response for request/cancel/confirm enrollment use cases"""

    enrollment_id: str
    status: str
