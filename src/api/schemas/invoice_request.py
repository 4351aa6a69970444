"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from decimal import Decimal
from typing import List, Union
from pydantic import BaseModel, Field, StrictBool, StrictInt


class InvoiceItemRequestSchema(BaseModel):
    """
    One requested invoice line

    Price and description are not accepted: they are read from the
    catalog when the invoice is issued. A boolean quantity stays a boolean
    so the use case rejects it with INVALID_QUANTITY.
    """

    service_id: str = Field(
        ...,
        min_length=1,
        description="Catalog service ID (required, non-empty)"
    )

    quantity: Union[StrictBool, StrictInt, Decimal] = Field(
        default=1,
        description="Units to sell (positive integer)"
    )


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for issuing an invoice

    Used for POST /invoices endpoint.
    """

    client_rtn: str = Field(
        ...,
        description="Client RTN (14 digits)"
    )

    client_name: str = Field(
        ...,
        description="Client name"
    )

    items: List[InvoiceItemRequestSchema] = Field(
        default_factory=list,
        description="Ordered invoice lines"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_rtn": "08011999123456",
                "client_name": "Juan Pérez",
                "items": [
                    {"service_id": "0b8f6a8e-5d0c-4f43-9b53-3c8f0a1d2e4f", "quantity": 2}
                ]
            }
        }
