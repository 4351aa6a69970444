from .unit_of_work import UnitOfWork
from .receipt_service import ReceiptService
from .invoice_calculator import (
    InvoiceCalculator,
    InvoiceCalculation,
    CalculatedLine,
    LineInput,
)
from .invoice_sequencer import InvoiceNumberSequencer, SequenceExhaustedError

__all__ = [
    "UnitOfWork",
    "ReceiptService",
    "InvoiceCalculator",
    "InvoiceCalculation",
    "CalculatedLine",
    "LineInput",
    "InvoiceNumberSequencer",
    "SequenceExhaustedError",
]
