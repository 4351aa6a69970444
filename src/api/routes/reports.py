"""Report API Routes"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from src.app.use_cases.reports import (
    GetSalesSummary,
    ExportInvoicesCsv,
    SalesSummaryDTO,
    resolve_range,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.depends import get_session, get_invoice_sequencer

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/sales", response_model=SalesSummaryDTO)
async def get_sales_summary(
    date_from: Optional[date] = Query(default=None, description="First day (default: today, UTC)"),
    date_to: Optional[date] = Query(default=None, description="Last day (default: today, UTC)"),
    session: AsyncSession = Depends(get_session),
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
):
    """
    Sales summary between two days, both inclusive.

    Includes invoice count, revenue, ISV collected, average ticket and a
    per-day breakdown.
    """
    start, end = resolve_range(date_from, date_to)
    use_case = GetSalesSummary(SqlAlchemyInvoiceRepository(session, sequencer))
    result = await use_case.execute(start, end)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/invoices.csv",
    responses={200: {"content": {"text/csv": {}}, "description": "CSV file"}},
)
async def export_invoices_csv(
    date_from: Optional[date] = Query(default=None, description="First day (default: today, UTC)"),
    date_to: Optional[date] = Query(default=None, description="Last day (default: today, UTC)"),
    session: AsyncSession = Depends(get_session),
    sequencer: InvoiceNumberSequencer = Depends(get_invoice_sequencer),
):
    """Download invoices between two days as CSV."""
    start, end = resolve_range(date_from, date_to)
    use_case = ExportInvoicesCsv(SqlAlchemyInvoiceRepository(session, sequencer))
    result = await use_case.execute(start, end)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return Response(
        content=result.value,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename=reporte-facturas-{start.isoformat()}.csv"
        },
    )
