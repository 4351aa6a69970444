"""Data Transfer Objects for Catalog Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.money import Money
from src.domain.service import UNLIMITED_STOCK


class CreateServiceCommandDTO(BaseModel):
    """
    Command DTO for adding a catalog service

    Used as input to CreateService use case.
    """

    code: str = Field(..., min_length=1, max_length=20, description="Unique service code")
    description: str = Field(..., min_length=1, description="Service description")
    price: Decimal = Field(..., ge=0, description="Unit price (ISV-inclusive when taxable)")
    category: str = Field(..., min_length=1, description="Catalog category")
    taxable: bool = Field(default=True, description="Whether the price includes ISV")
    stock: int = Field(default=UNLIMITED_STOCK, ge=UNLIMITED_STOCK, description="Units in stock (-1 = unlimited)")

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


class UpdateServiceCommandDTO(BaseModel):
    """
    Command DTO for a partial service update

    Only fields that are set are applied.
    """

    code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    description: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, min_length=1)
    taxable: Optional[bool] = Field(default=None)
    stock: Optional[int] = Field(default=None, ge=UNLIMITED_STOCK)


class ServiceResponseDTO(BaseModel):
    """Catalog service"""

    id: str = Field(..., description="Service ID")
    code: str = Field(..., description="Service code")
    description: str = Field(..., description="Service description")
    price: Money = Field(..., description="Unit price")
    category: str = Field(..., description="Catalog category")
    taxable: bool = Field(..., description="Whether the price includes ISV")
    stock: int = Field(..., description="Units in stock (-1 = unlimited)")
    created_at: datetime = Field(..., description="Creation timestamp")


class ListServicesResponseDTO(BaseModel):
    services: List[ServiceResponseDTO] = Field(..., description="Active services ordered by code")
    total: int = Field(..., description="Number of services returned")


def to_service_dto(service) -> ServiceResponseDTO:
    return ServiceResponseDTO(
        id=service.id,
        code=service.code,
        description=service.description,
        price=service.price,
        category=service.category,
        taxable=service.taxable,
        stock=service.stock,
        created_at=service.created_at,
    )
