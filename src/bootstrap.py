"""Application startup tasks

Creates tables, seeds the default catalog and resumes the invoice sequence.
"""

import logging
from sqlmodel import SQLModel
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.service_repository import SqlAlchemyServiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from src.app.use_cases.catalog.seed_catalog import SeedCatalog

# Register table models on SQLModel.metadata
import src.domain  # noqa: F401

logger = logging.getLogger(__name__)


async def create_tables(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def bootstrap(config, engine, session_factory, sequencer: InvoiceNumberSequencer) -> None:
    """
    Prepare storage and the sequencer before serving requests

    Args:
        config: ApplicationConfig-like object
        engine: Async SQLAlchemy engine
        session_factory: Factory producing AsyncSession instances
        sequencer: Application-wide invoice number sequencer
    """
    await create_tables(engine)

    async with session_factory() as session:
        if config.SEED_DEFAULT_SERVICES:
            result = await SeedCatalog(
                SqlAlchemyUnitOfWork(session), SqlAlchemyServiceRepository(session)
            ).execute()
            if result.is_err():
                raise RuntimeError(f"Catalog seeding failed: {result.error.reason}")

        if config.INVOICE_SEQUENCE_RESUME:
            invoice_repo = SqlAlchemyInvoiceRepository(session, sequencer)
            last_number = await invoice_repo.get_last_invoice_number()
            if last_number:
                sequencer.resume_from(last_number)

    logger.info(f"Startup complete, next invoice number {sequencer.peek()}")
