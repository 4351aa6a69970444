from .service_repository import SqlAlchemyServiceRepository
from .client_repository import SqlAlchemyClientRepository
from .invoice_repository import SqlAlchemyInvoiceRepository

__all__ = [
    "SqlAlchemyServiceRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyInvoiceRepository",
]
