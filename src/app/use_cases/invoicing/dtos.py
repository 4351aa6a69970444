"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
Monetary amounts serialize to JSON as fixed 2-decimal strings.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union
from pydantic import BaseModel, Field, StrictBool, StrictInt
from src.domain.money import Money


class InvoiceItemDTO(BaseModel):
    """
    Requested invoice line

    Only the catalog reference and quantity are accepted; description and
    price are always read from the catalog.
    """

    service_id: str = Field(
        ...,
        description="Catalog service ID"
    )

    quantity: Union[StrictBool, StrictInt, Decimal] = Field(
        default=1,
        description="Units to sell (must be a positive integer; booleans are kept and rejected)"
    )


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    client_rtn: str = Field(
        ...,
        description="Client RTN (14 digits)"
    )

    client_name: str = Field(
        ...,
        description="Client name (used when the RTN is seen for the first time)"
    )

    items: List[InvoiceItemDTO] = Field(
        default_factory=list,
        description="Ordered invoice lines"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_rtn": "08011999123456",
                "client_name": "Juan Pérez",
                "items": [
                    {"service_id": "0b8f6a8e-5d0c-4f43-9b53-3c8f0a1d2e4f", "quantity": 1},
                ]
            }
        }


class InvoiceLineDTO(BaseModel):
    """Invoice line item"""

    id: str = Field(..., description="Invoice line ID")
    service_id: str = Field(..., description="Catalog service ID")
    description: str = Field(..., description="Service description at issue time")
    unit_price: Money = Field(..., description="Unit price (ISV-inclusive when taxable)")
    quantity: int = Field(..., description="Units sold")
    line_subtotal: Money = Field(..., description="unit_price * quantity")
    taxable: bool = Field(..., description="Whether the line carries ISV")
    net_amount: Money = Field(..., description="Line amount without ISV")
    tax_amount: Money = Field(..., description="ISV contained in the line")


class InvoiceSummaryDTO(BaseModel):
    """
    Invoice header without line items

    Returned by ListInvoices.
    """

    invoice_id: str = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Fiscal invoice number")
    client_rtn: str = Field(..., description="Client RTN")
    client_name: str = Field(..., description="Client name")
    subtotal_exempt: Money = Field(..., description="Sum of exempt lines")
    subtotal_taxable_net: Money = Field(..., description="Sum of taxable lines without ISV")
    tax_amount: Money = Field(..., description="ISV amount")
    total: Money = Field(..., description="Invoice total")
    created_at: datetime = Field(..., description="Invoice creation timestamp")


class InvoiceResponseDTO(InvoiceSummaryDTO):
    """
    Full invoice with line items

    Returned by CreateInvoice and GetInvoice.
    """

    tax_rate: Decimal = Field(..., description="ISV rate applied (fraction)")
    line_items: List[InvoiceLineDTO] = Field(..., description="Ordered invoice lines")

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": "c7a1e3c2-9f7e-4b5e-8f3e-2d1c0b9a8f7e",
                "invoice_number": "001-001-01-000000001",
                "client_rtn": "08011999123456",
                "client_name": "Juan Pérez",
                "subtotal_exempt": "100.00",
                "subtotal_taxable_net": "100.00",
                "tax_amount": "15.00",
                "total": "215.00",
                "tax_rate": "0.15",
                "created_at": "2025-08-08T15:30:00Z",
                "line_items": [
                    {
                        "id": "1f0e2d3c-4b5a-6978-8a9b-0c1d2e3f4a5b",
                        "service_id": "0b8f6a8e-5d0c-4f43-9b53-3c8f0a1d2e4f",
                        "description": "Lavado Completo Premium",
                        "unit_price": "115.00",
                        "quantity": 1,
                        "line_subtotal": "115.00",
                        "taxable": True,
                        "net_amount": "100.00",
                        "tax_amount": "15.00"
                    }
                ]
            }
        }


class ListInvoicesResponseDTO(BaseModel):
    """Invoices ordered newest first"""

    invoices: List[InvoiceSummaryDTO] = Field(..., description="Invoices, newest first")
    total: int = Field(..., description="Total number of invoices")
    limit: Optional[int] = Field(default=None, description="Page size (None = all)")
    offset: int = Field(default=0, description="Page offset")


class InvoiceNumberPreviewDTO(BaseModel):
    """Pending invoice number (not consumed)"""

    invoice_number: str = Field(..., description="Number the next invoice will receive")


class ReceiptResponseDTO(BaseModel):
    """Rendered thermal receipt"""

    invoice_id: str = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Fiscal invoice number")
    pdf_base64: str = Field(..., description="Receipt PDF, base64 encoded")
    generated_at: datetime = Field(..., description="Rendering timestamp")
