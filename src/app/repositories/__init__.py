from .service_repository import ServiceRepository
from .client_repository import ClientRepository
from .invoice_repository import InvoiceRepository

__all__ = [
    "ServiceRepository",
    "ClientRepository",
    "InvoiceRepository",
]
