"""Invoice Domain Entity

Fiscal invoice issued at the point of sale.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, ForeignKey, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class Invoice(BaseModel, table=True):
    """
    Invoice - Fiscal invoice header

    Domain Rules:
    - invoice_number must be unique and is drawn from the sequencer on commit
    - total == subtotal_exempt + subtotal_taxable_net + tax_amount
    - total equals the sum of the lines' line_subtotal
    - Append-only: never updated or deleted once created
    - client_rtn and client_name are copies, independent of later client edits
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
        Index('ix_invoices_created_at', 'created_at'),
        Index('ix_invoices_client_rtn', 'client_rtn'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique invoice identifier (uuid)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Fiscal invoice number (e.g., 001-001-01-000000001)"
    )

    client_id: str = Field(
        sa_column=Column(String(36), ForeignKey("clients.id"), nullable=False),
        description="Foreign key to Client"
    )

    client_rtn: str = Field(
        sa_column=Column(String(14), nullable=False),
        description="Client RTN at issue time"
    )

    client_name: str = Field(
        description="Client name at issue time"
    )

    subtotal_exempt: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False, default=0),
        description="Sum of non-taxable line subtotals"
    )

    subtotal_taxable_net: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False, default=0),
        description="Sum of taxable line subtotals with ISV backed out"
    )

    tax_amount: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False, default=0),
        description="Total ISV contained in taxable lines"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Invoice total (ISV-inclusive)"
    )

    tax_rate: Decimal = Field(
        sa_column=Column(Numeric(5, 4), nullable=False),
        description="ISV rate applied (e.g., 0.1500)"
    )

    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=False),
        description="Issue timestamp in UTC, stamped when the invoice number is drawn"
    )
