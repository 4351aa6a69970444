"""Unit tests for GetInvoice, ListInvoices, PreviewInvoiceNumber and GenerateReceipt"""

import base64
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.errors import ErrorCode
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from src.app.use_cases.invoicing import (
    GetInvoice,
    ListInvoices,
    PreviewInvoiceNumber,
    GenerateReceipt,
)
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


def make_invoice(invoice_id="inv-1", number="001-001-01-000000001", total="115.00"):
    return Invoice(
        id=invoice_id,
        invoice_number=number,
        client_id="client-1",
        client_rtn="08011999123456",
        client_name="Juan Pérez",
        subtotal_exempt=Decimal("0.00"),
        subtotal_taxable_net=Decimal("100.00"),
        tax_amount=Decimal("15.00"),
        total=Decimal(total),
        tax_rate=Decimal("0.15"),
        created_at=datetime(2025, 8, 8, 15, 30, 0),
    )


def make_line(invoice_id="inv-1", position=0):
    return InvoiceLine(
        id=f"line-{position}",
        invoice_id=invoice_id,
        position=position,
        service_id="svc-1",
        description="Lavado Completo Premium",
        unit_price=Decimal("115.00"),
        quantity=1,
        line_subtotal=Decimal("115.00"),
        taxable=True,
        net_amount=Decimal("100.00"),
        tax_amount=Decimal("15.00"),
    )


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestGetInvoice:
    async def test_returns_invoice_with_lines(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=make_invoice())
        mock_invoice_repo.get_lines = AsyncMock(return_value=[make_line()])

        result = await GetInvoice(mock_invoice_repo).execute("inv-1")

        assert result.is_ok()
        assert result.value.invoice_number == "001-001-01-000000001"
        assert len(result.value.line_items) == 1
        assert result.value.line_items[0].net_amount == Decimal("100.00")

    async def test_not_found(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(mock_invoice_repo).execute("nope")

        assert result.is_err()
        assert result.error.code == ErrorCode.INVOICE_NOT_FOUND

    async def test_storage_failure(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(side_effect=Exception("connection lost"))

        result = await GetInvoice(mock_invoice_repo).execute("inv-1")

        assert result.error.code == ErrorCode.STORAGE_FAILURE


@pytest.mark.asyncio
class TestListInvoices:
    async def test_lists_headers_with_pagination_info(self, mock_invoice_repo):
        mock_invoice_repo.list_all = AsyncMock(
            return_value=[
                make_invoice("inv-2", "001-001-01-000000002"),
                make_invoice("inv-1", "001-001-01-000000001"),
            ]
        )
        mock_invoice_repo.count = AsyncMock(return_value=7)

        result = await ListInvoices(mock_invoice_repo).execute(limit=2, offset=0)

        assert result.is_ok()
        assert [i.invoice_id for i in result.value.invoices] == ["inv-2", "inv-1"]
        assert result.value.total == 7
        assert result.value.limit == 2
        mock_invoice_repo.list_all.assert_called_once_with(limit=2, offset=0)

    async def test_empty(self, mock_invoice_repo):
        mock_invoice_repo.list_all = AsyncMock(return_value=[])
        mock_invoice_repo.count = AsyncMock(return_value=0)

        result = await ListInvoices(mock_invoice_repo).execute()

        assert result.value.invoices == []
        assert result.value.total == 0


@pytest.mark.asyncio
class TestPreviewInvoiceNumber:
    async def test_preview_does_not_consume(self):
        sequencer = InvoiceNumberSequencer()
        use_case = PreviewInvoiceNumber(sequencer)

        first = await use_case.execute()
        second = await use_case.execute()

        assert first.value.invoice_number == "001-001-01-000000001"
        assert second.value.invoice_number == "001-001-01-000000001"
        assert sequencer.next_number() == "001-001-01-000000001"


@pytest.mark.asyncio
class TestGenerateReceipt:
    async def test_renders_base64_pdf(self, mock_invoice_repo):
        invoice = make_invoice()
        lines = [make_line()]
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice)
        mock_invoice_repo.get_lines = AsyncMock(return_value=lines)
        receipt_service = MagicMock()
        receipt_service.render_receipt = MagicMock(return_value=b"%PDF-1.4 fake")

        result = await GenerateReceipt(mock_invoice_repo, receipt_service).execute("inv-1")

        assert result.is_ok()
        assert base64.b64decode(result.value.pdf_base64) == b"%PDF-1.4 fake"
        assert result.value.invoice_number == invoice.invoice_number
        receipt_service.render_receipt.assert_called_once_with(
            invoice=invoice, invoice_lines=lines, printed_at=None
        )

    async def test_not_found(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)
        receipt_service = MagicMock()

        result = await GenerateReceipt(mock_invoice_repo, receipt_service).execute("nope")

        assert result.error.code == ErrorCode.INVOICE_NOT_FOUND
        receipt_service.render_receipt.assert_not_called()
