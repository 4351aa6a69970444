from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from config import ApplicationConfig
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from src.depends import get_session
from src.domain.base import utcnow
from src.domain.service import Service


class ApiTestConfig(ApplicationConfig):
    API_PREFIX = ""
    ENABLE_LOGGING_MIDDLEWARE = False
    CORS_ORIGINS = []


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create an in-memory SQLite engine shared by every session of a test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def sequencer():
    return InvoiceNumberSequencer()


@pytest_asyncio.fixture
async def catalog(db_session):
    """A taxable 115.00 wash and an exempt 50.00 product"""
    wash = Service(
        code="LAV001",
        description="Lavado Completo Premium",
        price=Decimal("115.00"),
        category="Lavado",
        taxable=True,
        created_at=utcnow(),
    )
    freshener = Service(
        code="ARO001",
        description="Aromatizante",
        price=Decimal("50.00"),
        category="Productos",
        taxable=False,
        stock=25,
        created_at=utcnow(),
    )
    db_session.add(wash)
    db_session.add(freshener)
    await db_session.commit()
    return {"wash": wash, "freshener": freshener}


@pytest_asyncio.fixture
async def app(db_session):
    from src.api.app import create_app

    app = create_app(ApiTestConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest_asyncio.fixture
async def client(app):
    """Create test client with database session override"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
