"""Catalog use cases"""
from .create_service import CreateService
from .update_service import UpdateService
from .delete_service import DeleteService
from .get_service import GetService, ListServices
from .seed_catalog import SeedCatalog, DEFAULT_SERVICES
from .dtos import (
    CreateServiceCommandDTO,
    UpdateServiceCommandDTO,
    ServiceResponseDTO,
    ListServicesResponseDTO,
)

__all__ = [
    "CreateService",
    "UpdateService",
    "DeleteService",
    "GetService",
    "ListServices",
    "SeedCatalog",
    "DEFAULT_SERVICES",
    "CreateServiceCommandDTO",
    "UpdateServiceCommandDTO",
    "ServiceResponseDTO",
    "ListServicesResponseDTO",
]
