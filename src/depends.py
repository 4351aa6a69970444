from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.receipt_service import ReportLabReceiptService
from src.app.services.invoice_calculator import InvoiceCalculator
from src.app.services.invoice_sequencer import InvoiceNumberSequencer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_invoice_sequencer(request: Request) -> InvoiceNumberSequencer:
    """The application-wide sequencer created by create_app"""
    return request.app.state.invoice_sequencer


def get_invoice_calculator(request: Request) -> InvoiceCalculator:
    return InvoiceCalculator(tax_rate=request.app.state.config.ISV_RATE)


def get_receipt_service(request: Request) -> ReportLabReceiptService:
    return ReportLabReceiptService.from_config(request.app.state.config)
