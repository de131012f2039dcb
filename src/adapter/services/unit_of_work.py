from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.enrollment_repository import EnrollmentRepository
from src.adapter.repositories.lecture_member_repository import LectureMemberRepository
from src.adapter.repositories.lecture_repository import LectureRepository
from src.adapter.repositories.member_repository import MemberRepository
from src.adapter.repositories.order_repository import OrderRepository
from src.adapter.repositories.payment_repository import PaymentRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.members = MemberRepository(self.session)
        self.lectures = LectureRepository(self.session)
        self.enrollments = EnrollmentRepository(self.session)
        self.lecture_members = LectureMemberRepository(self.session)
        self.orders = OrderRepository(self.session)
        self.payments = PaymentRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
