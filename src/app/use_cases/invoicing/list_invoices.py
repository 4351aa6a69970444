"""
List Invoices Use Case

Retrieves issued invoices, most recent first.
"""
from typing import Optional
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import ListInvoicesResponseDTO
from .mappers import to_summary_dto


class ListInvoices:
    """
    Use case: List invoices

    Invoices are ordered by created_at DESC (most recent first).
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> Result[ListInvoicesResponseDTO]:
        """
        List invoices with optional pagination.

        Args:
            limit: Maximum number of invoices to return (None = all)
            offset: Number of invoices to skip (default 0)

        Returns:
            Result[ListInvoicesResponseDTO]: Invoice headers
        """
        try:
            invoices = await self.invoice_repo.list_all(limit=limit, offset=offset)
            total = await self.invoice_repo.count()
        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=[to_summary_dto(invoice) for invoice in invoices],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
