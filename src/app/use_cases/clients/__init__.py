"""Client use cases"""
from .create_client import CreateClient
from .get_client import GetClientByRtn, ListClients, ValidateRtn
from .dtos import (
    CreateClientCommandDTO,
    ClientResponseDTO,
    ListClientsResponseDTO,
    RtnValidationResponseDTO,
)

__all__ = [
    "CreateClient",
    "GetClientByRtn",
    "ListClients",
    "ValidateRtn",
    "CreateClientCommandDTO",
    "ClientResponseDTO",
    "ListClientsResponseDTO",
    "RtnValidationResponseDTO",
]
