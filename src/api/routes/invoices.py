"""Invoice API Routes

FastAPI routes for issuing, listing and printing invoices.
"""

import base64
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.services.invoice_calculator import InvoiceCalculator
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from src.app.services.receipt_service import ReceiptService
from src.app.use_cases.invoicing import (
    CreateInvoice,
    GetInvoice,
    ListInvoices,
    PreviewInvoiceNumber,
    GenerateReceipt,
    CreateInvoiceCommandDTO,
    InvoiceItemDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    InvoiceNumberPreviewDTO,
    ReceiptResponseDTO,
)
from src.adapter.repositories.service_repository import SqlAlchemyServiceRepository
from src.adapter.repositories.client_repository import SqlAlchemyClientRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import (
    get_session,
    get_invoice_sequencer,
    get_invoice_calculator,
    get_receipt_service,
)

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice with ID 123 not found"
                    }
                }
            }
        }
    }
}


@router.get(
    "",
    response_model=ListInvoicesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session),
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
):
    """
    List issued invoices, most recent first.

    **Query parameters:**
    - `limit` (optional): Page size (all invoices when omitted)
    - `offset` (optional): Number of invoices to skip
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session, sequencer))
    result = await use_case.execute(limit=limit, offset=offset)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/next-number",
    response_model=InvoiceNumberPreviewDTO,
    status_code=status.HTTP_200_OK,
)
async def preview_next_invoice_number(
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
):
    """
    Show the number the next invoice will receive.

    The number is not reserved: only issuing an invoice consumes it.
    """
    result = await PreviewInvoiceNumber(sequencer).execute()
    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Invalid client data",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "RTN must have exactly 14 digits"
                        }
                    }
                }
            }
        },
        422: {
            "description": "Business rule violation",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "UNKNOWN_SERVICE",
                            "message": "Service with ID abc not found"
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
    calculator: InvoiceCalculator = Depends(get_invoice_calculator),
):
    """
    Issue an invoice.

    Prices, descriptions and ISV flags are taken from the catalog at the
    moment of issue. Prices of taxable services include ISV; the response
    shows the ISV backed out of them.

    **Request body:**
    - `client_rtn` (required): 14-digit RTN
    - `client_name` (required): Client name (stored on first sighting of the RTN)
    - `items` (required): List of `{service_id, quantity}`

    **Returns:**
    - 201: Invoice issued
    - 400: Invalid client data
    - 422: Empty invoice, unknown service or invalid quantity
    """
    uow = SqlAlchemyUnitOfWork(session)
    service_repo = SqlAlchemyServiceRepository(session)
    client_repo = SqlAlchemyClientRepository(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session, sequencer)

    command = CreateInvoiceCommandDTO(
        client_rtn=request.client_rtn,
        client_name=request.client_name,
        items=[
            InvoiceItemDTO(service_id=item.service_id, quantity=item.quantity)
            for item in request.items
        ],
    )

    use_case = CreateInvoice(uow, service_repo, client_repo, invoice_repo, calculator)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session),
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
):
    """Retrieve an invoice with its line items."""
    use_case = GetInvoice(SqlAlchemyInvoiceRepository(session, sequencer))
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/receipt",
    response_model=ReceiptResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_invoice_receipt(
    invoice_id: str,
    session: AsyncSession = Depends(get_session),
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
    receipt_service: ReceiptService = Depends(get_receipt_service),
):
    """
    Render the thermal receipt of an invoice as base64-encoded PDF.

    **Returns:**
    - 200: Receipt rendered
    - 404: Invoice not found
    """
    use_case = GenerateReceipt(SqlAlchemyInvoiceRepository(session, sequencer), receipt_service)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/receipt/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        **NOT_FOUND_RESPONSE,
    }
)
async def download_invoice_receipt_pdf(
    invoice_id: str,
    session: AsyncSession = Depends(get_session),
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
    receipt_service: ReceiptService = Depends(get_receipt_service),
):
    """
    Download the thermal receipt as a PDF file, ready to print.
    """
    use_case = GenerateReceipt(SqlAlchemyInvoiceRepository(session, sequencer), receipt_service)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"inline; filename=factura_{result.value.invoice_number}.pdf"
        }
    )
