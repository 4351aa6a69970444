"""Unit tests for ReportLabReceiptService"""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.adapter.services.receipt_service import ReportLabReceiptService
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


@pytest.fixture
def invoice():
    return Invoice(
        id="inv-1",
        invoice_number="001-001-01-000000001",
        client_id="client-1",
        client_rtn="08011999123456",
        client_name="Juan Pérez & Hijos <S.A.>",
        subtotal_exempt=Decimal("100.00"),
        subtotal_taxable_net=Decimal("100.00"),
        tax_amount=Decimal("15.00"),
        total=Decimal("215.00"),
        tax_rate=Decimal("0.1500"),
        created_at=datetime(2025, 8, 8, 15, 30, 0),
    )


def make_lines(count):
    return [
        InvoiceLine(
            id=f"line-{i}",
            invoice_id="inv-1",
            position=i,
            service_id="svc-1",
            description=f"Servicio número {i} con una descripción bastante larga",
            unit_price=Decimal("115.00"),
            quantity=1,
            line_subtotal=Decimal("115.00"),
            taxable=True,
            net_amount=Decimal("100.00"),
            tax_amount=Decimal("15.00"),
        )
        for i in range(count)
    ]


def make_service(paper_width="58mm"):
    return ReportLabReceiptService(
        business_name="CARWASH PEÑA BLANCA",
        business_address="Peña Blanca, Cortés",
        business_phone="9464-8987",
        business_rtn="08011987654321",
        paper_width=paper_width,
    )


class TestReportLabReceiptService:
    @pytest.mark.parametrize("paper_width", ["58mm", "80mm"])
    def test_renders_pdf(self, invoice, paper_width):
        pdf = make_service(paper_width).render_receipt(invoice, make_lines(2))

        assert pdf.startswith(b"%PDF")

    def test_long_invoices_fit_on_one_page(self, invoice):
        pdf = make_service().render_receipt(invoice, make_lines(40))

        assert pdf.startswith(b"%PDF")
        assert b"/Count 1 " in pdf

    def test_unknown_paper_width(self):
        with pytest.raises(ValueError):
            make_service("110mm")

    def test_from_config(self):
        config = SimpleNamespace(
            BUSINESS_NAME="CARWASH",
            BUSINESS_ADDRESS="Calle 1",
            BUSINESS_PHONE="0000-0000",
            BUSINESS_RTN="08011987654321",
            RECEIPT_PAPER_WIDTH="80mm",
            RECEIPT_FOOTER="Gracias",
            CURRENCY_SYMBOL="L.",
        )

        service = ReportLabReceiptService.from_config(config)

        assert service.paper_width == "80mm"
        assert service.footer == "Gracias"
