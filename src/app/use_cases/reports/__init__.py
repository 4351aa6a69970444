"""Report use cases"""
from .get_sales_summary import GetSalesSummary
from .export_invoices_csv import ExportInvoicesCsv, CSV_HEADER
from .dtos import DailyRevenueDTO, SalesSummaryDTO
from ._range import resolve_range

__all__ = [
    "GetSalesSummary",
    "ExportInvoicesCsv",
    "CSV_HEADER",
    "DailyRevenueDTO",
    "SalesSummaryDTO",
    "resolve_range",
]
