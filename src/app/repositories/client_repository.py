"""Client Repository Interface

Defines the contract for client persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.client import Client


class ClientRepository(ABC):
    """Repository interface for Client persistence"""

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Optional[Client]:
        pass

    @abstractmethod
    async def get_by_rtn(self, rtn: str) -> Optional[Client]:
        """
        Retrieve client by RTN

        Args:
            rtn: 14-digit taxpayer number

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        pass

    @abstractmethod
    async def list_all(self) -> List[Client]:
        """List clients ordered by name"""
        pass

    @abstractmethod
    async def upsert_if_absent(self, rtn: str, name: str) -> Client:
        """
        Return the client registered under rtn, creating it if absent

        An existing client's name is never overwritten.

        Args:
            rtn: 14-digit taxpayer number
            name: Name to use only when the client is created

        Returns:
            Existing or newly created Client
        """
        pass
