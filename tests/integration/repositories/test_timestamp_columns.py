"""Integration tests for timestamp storage

Timestamps are naive UTC values in plain DateTime columns, so inserts do not
depend on how the installed SQLModel maps ``datetime`` fields.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import DateTime
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.client_repository import SqlAlchemyClientRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.service_repository import SqlAlchemyServiceRepository
from src.domain.base import utcnow
from src.domain.client import Client
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.service import Service


@pytest.mark.parametrize(
    "column",
    [
        Service.__table__.c.created_at,
        Service.__table__.c.deleted_at,
        Client.__table__.c.created_at,
        Invoice.__table__.c.created_at,
    ],
    ids=["service.created_at", "service.deleted_at", "client.created_at", "invoice.created_at"],
)
def test_timestamp_columns_are_plain_naive_datetime(column):
    assert type(column.type) is DateTime
    assert column.type.timezone is False


def test_utcnow_is_naive():
    now = utcnow()

    assert now.tzinfo is None
    assert datetime.now(timezone.utc).replace(tzinfo=None) - now < timedelta(seconds=5)


@pytest.mark.asyncio
class TestTimestampRoundTrip:
    async def test_default_timestamps_commit_and_reload(self, engine, sequencer):
        """
        Given: A service, a client and an invoice with default timestamps
        When: They are committed and read back in a new session
        Then: Every timestamp is a naive datetime equal to what was written
        """
        Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with Session() as session:
            service = await SqlAlchemyServiceRepository(session).create(
                Service(code="LAV001", description="Lavado", price=Decimal("115.00"), category="Lavado")
            )
            client = await SqlAlchemyClientRepository(session).upsert_if_absent(
                "08011999123456", "Juan Pérez"
            )
            invoice = await SqlAlchemyInvoiceRepository(session, sequencer).create(
                Invoice(
                    client_id=client.id,
                    client_rtn=client.rtn,
                    client_name=client.name,
                    subtotal_exempt=Decimal("0.00"),
                    subtotal_taxable_net=Decimal("100.00"),
                    tax_amount=Decimal("15.00"),
                    total=Decimal("115.00"),
                    tax_rate=Decimal("0.15"),
                ),
                [
                    InvoiceLine(
                        service_id=service.id,
                        description=service.description,
                        unit_price=Decimal("115.00"),
                        quantity=1,
                        line_subtotal=Decimal("115.00"),
                        taxable=True,
                        net_amount=Decimal("100.00"),
                        tax_amount=Decimal("15.00"),
                    )
                ],
            )
            await SqlAlchemyServiceRepository(session).delete(service.id)
            await session.commit()
            written = {
                "service": (service.created_at, service.deleted_at),
                "client": client.created_at,
                "invoice": invoice.created_at,
            }

        async with Session() as session:
            stored_service = (
                await session.execute(select(Service).where(Service.id == service.id))
            ).scalar_one()
            stored_client = (
                await session.execute(select(Client).where(Client.id == client.id))
            ).scalar_one()
            stored_invoice = (
                await session.execute(select(Invoice).where(Invoice.id == invoice.id))
            ).scalar_one()

        assert (stored_service.created_at, stored_service.deleted_at) == written["service"]
        assert stored_client.created_at == written["client"]
        assert stored_invoice.created_at == written["invoice"]
        for value in (
            stored_service.created_at,
            stored_service.deleted_at,
            stored_client.created_at,
            stored_invoice.created_at,
        ):
            assert value.tzinfo is None
