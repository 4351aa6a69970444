"""Request schemas for Catalog and Client API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from src.domain.service import UNLIMITED_STOCK


class CreateServiceRequestSchema(BaseModel):
    """
    Request schema for adding a catalog service

    Used for POST /services endpoint.
    """

    code: str = Field(..., min_length=1, max_length=20, description="Unique service code")
    description: str = Field(..., min_length=1, description="Service description")
    price: Decimal = Field(..., ge=0, description="Unit price (ISV-inclusive when taxable)")
    category: str = Field(..., min_length=1, description="Catalog category")
    taxable: bool = Field(default=True, description="Whether the price includes ISV")
    stock: int = Field(default=UNLIMITED_STOCK, ge=UNLIMITED_STOCK, description="Units in stock (-1 = unlimited)")

    @field_validator('price')
    @classmethod
    def validate_price(cls, v):
        """Ensure price has at most cent precision"""
        if v.as_tuple().exponent < -2 and v != v.quantize(Decimal("0.01")):
            raise ValueError("Price must have at most 2 decimal places")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "code": "LAV003",
                "description": "Lavado de Motor",
                "price": "200.00",
                "category": "Lavado",
                "taxable": True,
                "stock": -1
            }
        }


class UpdateServiceRequestSchema(BaseModel):
    """
    Request schema for partially updating a catalog service

    Used for PUT /services/{service_id} endpoint.
    """

    code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    description: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, min_length=1)
    taxable: Optional[bool] = Field(default=None)
    stock: Optional[int] = Field(default=None, ge=UNLIMITED_STOCK)

    @field_validator('price')
    @classmethod
    def validate_price(cls, v):
        if v is not None and v.as_tuple().exponent < -2 and v != v.quantize(Decimal("0.01")):
            raise ValueError("Price must have at most 2 decimal places")
        return v


class CreateClientRequestSchema(BaseModel):
    """Request schema for POST /clients"""

    rtn: str = Field(..., description="Client RTN (14 digits)")
    name: str = Field(..., description="Client name")


class ValidateRtnRequestSchema(BaseModel):
    """Request schema for POST /validate-rtn"""

    rtn: str = Field(default="", description="RTN to check")
