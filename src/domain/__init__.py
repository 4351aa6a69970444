from .base import BaseModel, generate_uuid
from .service import Service, UNLIMITED_STOCK
from .client import Client, RTN_LENGTH, is_valid_rtn
from .invoice import Invoice
from .invoice_line import InvoiceLine
from .money import round2, to_decimal, format_money, Money

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Service",
    "UNLIMITED_STOCK",
    "Client",
    "RTN_LENGTH",
    "is_valid_rtn",
    "Invoice",
    "InvoiceLine",
    "round2",
    "to_decimal",
    "format_money",
    "Money",
]
