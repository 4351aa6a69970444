"""GetInvoice Use Case

Retrieves an issued invoice with its line items.
"""

from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO
from .mappers import to_response_dto


class GetInvoice:
    """Use Case: Retrieve an invoice by ID"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceResponseDTO]:
        """
        Retrieve invoice and lines

        Args:
            invoice_id: Invoice ID

        Returns:
            Result[InvoiceResponseDTO]: Invoice or INVOICE_NOT_FOUND
        """
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code=ErrorCode.INVOICE_NOT_FOUND,
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            lines = await self.invoice_repo.get_lines(invoice_id)
            return Return.ok(to_response_dto(invoice, lines))

        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
