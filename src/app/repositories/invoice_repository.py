"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Invoices are append-only: there is no update or delete.
    """

    @abstractmethod
    async def create(self, invoice: Invoice, lines: Sequence[InvoiceLine]) -> Invoice:
        """
        Create an invoice together with its lines

        Assigns the next invoice number and links every line to the invoice.
        Header and lines belong to the same unit of work, so they are
        committed or rolled back together.

        Args:
            invoice: Invoice header (invoice_number is assigned here)
            lines: Ordered invoice lines (at least one)

        Returns:
            Created Invoice with its invoice number
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    async def get_lines(self, invoice_id: str) -> List[InvoiceLine]:
        """
        Retrieve the lines of an invoice in their original order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items
        """
        pass

    @abstractmethod
    async def list_all(self, limit: Optional[int] = None, offset: int = 0) -> List[Invoice]:
        """
        List invoices ordered by creation time, newest first

        Args:
            limit: Maximum number of invoices to return (None = all)
            offset: Offset for pagination

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def list_between(self, start: datetime, end: datetime) -> List[Invoice]:
        """
        List invoices created in [start, end), oldest first

        Used by sales reports.
        """
        pass

    @abstractmethod
    async def get_last_invoice_number(self) -> Optional[str]:
        """
        Return the highest invoice number issued so far

        Used to resume the sequencer after a restart.
        """
        pass
