"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .preview_invoice_number import PreviewInvoiceNumber
from .generate_receipt import GenerateReceipt
from .dtos import (
    InvoiceItemDTO,
    CreateInvoiceCommandDTO,
    InvoiceLineDTO,
    InvoiceSummaryDTO,
    InvoiceResponseDTO,
    ListInvoicesResponseDTO,
    InvoiceNumberPreviewDTO,
    ReceiptResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "GetInvoice",
    "ListInvoices",
    "PreviewInvoiceNumber",
    "GenerateReceipt",
    "InvoiceItemDTO",
    "CreateInvoiceCommandDTO",
    "InvoiceLineDTO",
    "InvoiceSummaryDTO",
    "InvoiceResponseDTO",
    "ListInvoicesResponseDTO",
    "InvoiceNumberPreviewDTO",
    "ReceiptResponseDTO",
]
