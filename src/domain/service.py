"""Service Domain Entity

Catalog entry for a car-wash service or a product sold at the counter.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, Numeric, String
from src.domain.base import BaseModel, generate_uuid, utcnow

UNLIMITED_STOCK = -1


class Service(BaseModel, table=True):
    """
    Service - Sellable catalog item

    Domain Rules:
    - code is unique across non-deleted services
    - price is ISV-inclusive when taxable is True
    - stock == -1 means unlimited (services), >= 0 for counted products
    - Deletion is soft (deleted_at) so invoice lines keep a valid reference
    """

    __tablename__ = "services"
    __table_args__ = (
        Index('ix_services_code', 'code'),
        Index('ix_services_category', 'category'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique service identifier (uuid)"
    )

    code: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Human-facing service code (e.g., LAV001)"
    )

    description: str = Field(
        description="Service description printed on invoices"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Unit price (ISV-inclusive when taxable, precision: 10,2)"
    )

    category: str = Field(
        description="Catalog category (e.g., Lavado, Detailing)"
    )

    taxable: bool = Field(
        default=True,
        description="Whether the price includes ISV"
    )

    stock: int = Field(
        default=UNLIMITED_STOCK,
        description="Units in stock (-1 = unlimited)"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="Creation timestamp (UTC)"
    )

    deleted_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=True),
        description="Soft deletion timestamp in UTC (None = active)"
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def has_unlimited_stock(self) -> bool:
        return self.stock == UNLIMITED_STOCK
