from abc import ABC, abstractmethod

from src.app.repositories.enrollment_repository import IEnrollmentRepository
from src.app.repositories.lecture_member_repository import ILectureMemberRepository
from src.app.repositories.lecture_repository import ILectureRepository
from src.app.repositories.member_repository import IMemberRepository
from src.app.repositories.order_repository import IOrderRepository
from src.app.repositories.payment_repository import IPaymentRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    members: IMemberRepository
    lectures: ILectureRepository
    enrollments: IEnrollmentRepository
    lecture_members: ILectureMemberRepository
    orders: IOrderRepository
    payments: IPaymentRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
