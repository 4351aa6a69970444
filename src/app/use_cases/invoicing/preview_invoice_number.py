"""PreviewInvoiceNumber Use Case

Shows the number the next invoice will receive without allocating it.
"""

from libs.result import Result, Return
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from .dtos import InvoiceNumberPreviewDTO


class PreviewInvoiceNumber:
    """
    Use Case: Preview the pending invoice number

    Read-only. Only CreateInvoice consumes numbers, so two invoices created
    after the same preview still receive distinct numbers.
    """

    def __init__(self, sequencer: InvoiceNumberSequencer):
        self.sequencer = sequencer

    async def execute(self) -> Result[InvoiceNumberPreviewDTO]:
        return Return.ok(InvoiceNumberPreviewDTO(invoice_number=self.sequencer.peek()))
