"""Receipt Rendering Service Interface

Defines the contract for rendering printable invoice receipts.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


class ReceiptService(ABC):
    """
    Service interface for receipt rendering

    Implementations produce a document ready to send to a thermal printer.
    """

    @abstractmethod
    def render_receipt(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        printed_at: Optional[datetime] = None,
    ) -> bytes:
        """
        Render a thermal receipt for a persisted invoice

        Args:
            invoice: Invoice header with totals
            invoice_lines: Ordered line items of the invoice
            printed_at: Timestamp to print (defaults to invoice.created_at)

        Returns:
            Rendered document as bytes
        """
        pass
