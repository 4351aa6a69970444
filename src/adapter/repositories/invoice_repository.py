"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from datetime import datetime
from typing import List, Optional, Sequence
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from src.domain.base import utcnow
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Invoice numbers come from the shared sequencer; the session holds header
    and lines until the unit of work commits.
    """

    def __init__(self, session: AsyncSession, sequencer: InvoiceNumberSequencer):
        self.session = session
        self.sequencer = sequencer

    async def create(self, invoice: Invoice, lines: Sequence[InvoiceLine]) -> Invoice:
        """
        Create an invoice together with its lines

        Args:
            invoice: Invoice header (invoice_number, and created_at when unset, are assigned here)
            lines: Ordered invoice lines

        Returns:
            Created Invoice
        """
        if not lines:
            raise ValueError("An invoice cannot be stored without lines")

        # Number and timestamp are taken together so list order follows numbering
        invoice.invoice_number = self.sequencer.next_number()
        if invoice.created_at is None:
            invoice.created_at = utcnow()
        self.session.add(invoice)
        await self.session.flush()

        for position, line in enumerate(lines):
            line.invoice_id = invoice.id
            line.position = position
            self.session.add(line)

        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_lines(self, invoice_id: str) -> List[InvoiceLine]:
        statement = (
            select(InvoiceLine)
            .where(InvoiceLine.invoice_id == invoice_id)
            .order_by(InvoiceLine.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self, limit: Optional[int] = None, offset: int = 0) -> List[Invoice]:
        # invoice_number breaks ties between invoices created in the same instant
        statement = select(Invoice).order_by(
            Invoice.created_at.desc(), Invoice.invoice_number.desc()
        )

        if limit is not None:
            statement = statement.limit(limit)
        if offset:
            statement = statement.offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count(self) -> int:
        statement = select(func.count()).select_from(Invoice)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def list_between(self, start: datetime, end: datetime) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.created_at >= start)
            .where(Invoice.created_at < end)
            .order_by(Invoice.created_at, Invoice.invoice_number)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_last_invoice_number(self) -> Optional[str]:
        """
        Return the highest invoice number for the sequencer's prefix

        Counters are zero-padded, so the lexical maximum is the numeric one.
        """
        statement = (
            select(func.max(Invoice.invoice_number))
            .where(Invoice.invoice_number.like(f"{self.sequencer.prefix}%"))
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
