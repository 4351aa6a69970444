"""GenerateReceipt Use Case

Renders the thermal receipt of an issued invoice.
"""

import base64
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.receipt_service import ReceiptService
from src.domain.base import utcnow
from .dtos import ReceiptResponseDTO


class GenerateReceipt:
    """
    Use Case: Render thermal receipt PDF

    Business Rules:
    1. Invoice must exist
    2. Receipt shows the persisted snapshot, never current catalog data

    Flow:
    1. Retrieve invoice by ID
    2. Retrieve invoice line items
    3. Render receipt using the receipt service
    4. Return response with PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        receipt_service: ReceiptService,
    ):
        self.invoice_repo = invoice_repo
        self.receipt_service = receipt_service

    async def execute(
        self, invoice_id: str, printed_at: Optional[datetime] = None
    ) -> Result[ReceiptResponseDTO]:
        """
        Execute receipt rendering

        Args:
            invoice_id: Invoice ID to render
            printed_at: Timestamp printed on the receipt (defaults to issue time)

        Returns:
            Result[ReceiptResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code=ErrorCode.INVOICE_NOT_FOUND,
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Retrieve invoice line items
            invoice_lines = await self.invoice_repo.get_lines(invoice_id)

            # Step 3: Render receipt
            pdf_bytes = self.receipt_service.render_receipt(
                invoice=invoice,
                invoice_lines=invoice_lines,
                printed_at=printed_at,
            )

            # Step 4: Build response
            return Return.ok(
                ReceiptResponseDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=utcnow(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to generate receipt",
                    reason=str(e),
                )
            )
