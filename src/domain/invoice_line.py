"""Invoice Line Domain Entity

Snapshot of a catalog service sold on an invoice.
"""

from decimal import Decimal
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - Each line belongs to exactly one invoice
    - line_subtotal = round2(unit_price * quantity)
    - net_amount + tax_amount == line_subtotal (tax_amount is 0 when exempt)
    - description, unit_price and taxable are snapshots of the catalog
    - Immutable once the invoice is committed
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique invoice line identifier (uuid)"
    )

    invoice_id: str = Field(
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        default=0,
        description="Zero-based order of the line within the invoice"
    )

    service_id: str = Field(
        sa_column=Column(String(36), ForeignKey("services.id"), nullable=False),
        description="Foreign key to the catalog Service"
    )

    description: str = Field(
        description="Service description at issue time"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Unit price at issue time (ISV-inclusive when taxable)"
    )

    quantity: int = Field(
        description="Units sold (positive integer)"
    )

    line_subtotal: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="unit_price * quantity rounded to 2 decimals"
    )

    taxable: bool = Field(
        default=True,
        description="Whether the line carries ISV"
    )

    net_amount: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Line amount without ISV"
    )

    tax_amount: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False, default=0),
        description="ISV contained in the line"
    )
