"""Service Repository Interface

Defines the contract for catalog persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from src.domain.service import Service


class ServiceRepository(ABC):
    """
    Repository interface for catalog Service persistence

    Soft-deleted services are invisible to every read operation.
    """

    @abstractmethod
    async def create(self, service: Service) -> Service:
        """
        Create a new service

        Args:
            service: Service entity to persist

        Returns:
            Created Service
        """
        pass

    @abstractmethod
    async def get_by_id(self, service_id: str) -> Optional[Service]:
        """
        Retrieve an active service by ID

        Args:
            service_id: Service ID

        Returns:
            Service if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Service]:
        """
        Retrieve an active service by its code

        Args:
            code: Human-facing service code

        Returns:
            Service if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_ids(self, service_ids: Sequence[str]) -> Dict[str, Service]:
        """
        Retrieve active services for a set of IDs

        Args:
            service_ids: Service IDs (duplicates allowed)

        Returns:
            Mapping of ID to Service; unknown or deleted IDs are absent
        """
        pass

    @abstractmethod
    async def list_all(self, category: Optional[str] = None) -> List[Service]:
        """
        List active services ordered by code

        Args:
            category: Optional filter by category

        Returns:
            List of services
        """
        pass

    @abstractmethod
    async def update(self, service: Service) -> Service:
        """
        Persist changes to an existing service

        Args:
            service: Service entity with updated values

        Returns:
            Updated Service
        """
        pass

    @abstractmethod
    async def delete(self, service_id: str) -> bool:
        """
        Soft delete a service

        Args:
            service_id: Service ID

        Returns:
            True if an active service was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count active services"""
        pass
