"""ExportInvoicesCsv Use Case

Exports the invoices of a date range as CSV.
"""

import csv
import io
from datetime import date
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.money import format_money
from ._range import day_range

CSV_HEADER = ["Fecha", "Número", "Cliente", "RTN", "Total"]


class ExportInvoicesCsv:
    """Use Case: CSV export, oldest invoice first"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, date_from: date, date_to: date) -> Result[str]:
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
                    message="Failed to load invoices for export",
                    reason=str(e),
                )
            )

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for invoice in invoices:
            writer.writerow(
                [
                    invoice.created_at.strftime("%d/%m/%Y"),
                    invoice.invoice_number,
                    invoice.client_name,
                    invoice.client_rtn,
                    format_money(invoice.total),
                ]
            )

        return Return.ok(buffer.getvalue())
