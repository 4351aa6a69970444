"""Data Transfer Objects for Client Use Cases"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class CreateClientCommandDTO(BaseModel):
    """Command DTO for registering a client"""

    rtn: str = Field(..., description="Client RTN (14 digits)")
    name: str = Field(..., description="Client name")

    class Config:
        json_schema_extra = {
            "example": {
                "rtn": "08011999123456",
                "name": "Juan Pérez"
            }
        }


class ClientResponseDTO(BaseModel):
    id: str = Field(..., description="Client ID")
    rtn: str = Field(..., description="Client RTN")
    name: str = Field(..., description="Client name")
    created_at: datetime = Field(..., description="First sighting timestamp")


class ListClientsResponseDTO(BaseModel):
    clients: List[ClientResponseDTO] = Field(..., description="Clients ordered by name")
    total: int = Field(..., description="Number of clients")


class RtnValidationResponseDTO(BaseModel):
    valid: bool = Field(..., description="Whether the RTN has a valid format")
    message: str = Field(..., description="Human-readable result")


def to_client_dto(client) -> ClientResponseDTO:
    return ClientResponseDTO(
        id=client.id,
        rtn=client.rtn,
        name=client.name,
        created_at=client.created_at,
    )
