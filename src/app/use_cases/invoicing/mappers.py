"""Entity to DTO conversion for invoices"""

from typing import List
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from .dtos import InvoiceLineDTO, InvoiceResponseDTO, InvoiceSummaryDTO


def to_summary_dto(invoice: Invoice) -> InvoiceSummaryDTO:
    return InvoiceSummaryDTO(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        client_rtn=invoice.client_rtn,
        client_name=invoice.client_name,
        subtotal_exempt=invoice.subtotal_exempt,
        subtotal_taxable_net=invoice.subtotal_taxable_net,
        tax_amount=invoice.tax_amount,
        total=invoice.total,
        created_at=invoice.created_at,
    )


def to_response_dto(invoice: Invoice, lines: List[InvoiceLine]) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        **to_summary_dto(invoice).model_dump(),
        tax_rate=invoice.tax_rate,
        line_items=[
            InvoiceLineDTO(
                id=line.id,
                service_id=line.service_id,
                description=line.description,
                unit_price=line.unit_price,
                quantity=line.quantity,
                line_subtotal=line.line_subtotal,
                taxable=line.taxable,
                net_amount=line.net_amount,
                tax_amount=line.tax_amount,
            )
            for line in lines
        ],
    )
