"""GetSalesSummary Use Case

Aggregates issued invoices over a date range.
"""

from collections import OrderedDict
from datetime import date
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.money import round2
from ._range import day_range
from .dtos import DailyRevenueDTO, SalesSummaryDTO

ZERO = Decimal("0.00")


class GetSalesSummary:
    """
    Use Case: Sales summary

    Business Rules:
    1. Range is inclusive on both ends, by UTC calendar day
    2. Average ticket is 0.00 when no invoices were issued
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, date_from: date, date_to: date) -> Result[SalesSummaryDTO]:
        range_result = day_range(date_from, date_to)
        if range_result.is_err():
            return range_result
        start, end = range_result.value

        try:
            invoices = await self.invoice_repo.list_between(start, end)
        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to load invoices for report",
                    reason=str(e),
                )
            )

        total_revenue = sum((invoice.total for invoice in invoices), ZERO)
        by_day = OrderedDict()
        for invoice in invoices:
            day = invoice.created_at.date()
            count, revenue = by_day.get(day, (0, ZERO))
            by_day[day] = (count + 1, revenue + invoice.total)

        return Return.ok(
            SalesSummaryDTO(
                date_from=date_from,
                date_to=date_to,
                invoice_count=len(invoices),
                total_revenue=total_revenue,
                subtotal_exempt=sum((i.subtotal_exempt for i in invoices), ZERO),
                subtotal_taxable_net=sum((i.subtotal_taxable_net for i in invoices), ZERO),
                tax_amount=sum((i.tax_amount for i in invoices), ZERO),
                average_ticket=round2(total_revenue / len(invoices)) if invoices else ZERO,
                revenue_by_day=[
                    DailyRevenueDTO(day=day, invoice_count=count, revenue=revenue)
                    for day, (count, revenue) in by_day.items()
                ],
            )
        )
