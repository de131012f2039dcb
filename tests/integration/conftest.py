import bcrypt
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401 - registers tables on SQLModel.metadata
from src.adapter.repositories.member_repository import MemberRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import create_access_token
from src.app.services.payment_gateway import (
    GatewayPayment,
    IPaymentGateway,
    PaymentGatewayError,
)
from src.depends import get_payment_gateway, get_unit_of_work
from src.domain.entities import Grade, Member

PASSWORD_HASH = bcrypt.hashpw(b"SecurePass123!", bcrypt.gensalt(rounds=4)).decode("utf-8")


class FakePaymentGateway(IPaymentGateway):
    """In-memory gateway: payments are registered by the test"""

    def __init__(self):
        self.payments = {}
        self.cancelled = []

    async def get_payment(self, payment_uid: str) -> GatewayPayment:
        if payment_uid not in self.payments:
            raise PaymentGatewayError(f"Unknown payment {payment_uid}")
        return self.payments[payment_uid]

    async def cancel_payment(self, payment_uid: str, amount: int) -> None:
        self.cancelled.append((payment_uid, amount))


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def payment_gateway():
    return FakePaymentGateway()


@pytest_asyncio.fixture
async def client(db_session, payment_gateway):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def create_member(db_session):
    """Factory inserting a committed member"""
    counter = {"n": 0}

    async def _create(grade: Grade = Grade.Freetier, name: str = "Member") -> Member:
        counter["n"] += 1
        member = Member(
            email=f"member{counter['n']}@example.com",
            name=name,
            password_hash=PASSWORD_HASH,
            grade=grade,
        )
        member = await MemberRepository(db_session).create(member)
        await db_session.commit()
        return member

    return _create


@pytest_asyncio.fixture
def auth_headers():
    """Bearer header for a member"""

    def _headers(member: Member) -> dict:
        token = create_access_token(
            member_id=str(member.id), authority=member.authority.value
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers
