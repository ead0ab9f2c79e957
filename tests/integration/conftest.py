from urllib.parse import parse_qs, urlparse

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_service.app.services.notifier import INotifier
from auth_service.app.services.password_hasher import PasswordHasher
from auth_service.depends import get_notifier, get_password_hasher, get_unit_of_work
from tests.utils.auth_helpers import wait_for_deliveries


class RecordingNotifier(INotifier):
    """Keeps sent reset links in memory instead of delivering them"""

    def __init__(self):
        self.sent = []

    async def send_password_reset(self, email: str, reset_url: str) -> None:
        self.sent.append((email, reset_url))

    def last_secret(self) -> str:
        _, reset_url = self.sent[-1]
        return parse_qs(urlparse(reset_url).query)["token"][0]


@pytest.fixture
def notifier():
    return RecordingNotifier()


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
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, notifier):
    from httpx import ASGITransport
    from auth_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    fast_hasher = PasswordHasher(rounds=4)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = ASGITransport(app=app)

    async def settle_deliveries(response):
        await wait_for_deliveries()

    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        event_hooks={"response": [settle_deliveries]},
    ) as ac:
        yield ac
