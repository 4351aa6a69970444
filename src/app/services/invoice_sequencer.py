"""Invoice Number Sequencer

Allocates fiscal invoice numbers of the form
``{branch}-{pos}-{type}-{counter:09d}`` (e.g., 001-001-01-000000001).
"""

import logging
import threading

logger = logging.getLogger(__name__)

COUNTER_DIGITS = 9
MAX_COUNTER = 10 ** COUNTER_DIGITS - 1


class SequenceExhaustedError(RuntimeError):
    """Raised when the 9-digit counter has no numbers left"""


class InvoiceNumberSequencer:
    """
    Process-local invoice number allocator

    The counter starts at 1 and only moves forward. Allocation and increment
    happen under one lock, so concurrent callers (threads or coroutines)
    never receive the same number. A number is consumed once allocated,
    even if the invoice that drew it is later rolled back.

    Durability across restarts is the caller's concern: seed the counter
    with ``resume_from`` using the last persisted number.
    """

    def __init__(
        self,
        branch: str = "001",
        pos: str = "001",
        doc_type: str = "01",
        start: int = 1,
    ):
        self.prefix = f"{branch}-{pos}-{doc_type}-"
        self._lock = threading.Lock()
        self._next = self._validate_start(start)

    @classmethod
    def from_config(cls, config) -> "InvoiceNumberSequencer":
        return cls(
            branch=config.INVOICE_BRANCH,
            pos=config.INVOICE_POS,
            doc_type=config.INVOICE_DOC_TYPE,
        )

    @staticmethod
    def _validate_start(start: int) -> int:
        if isinstance(start, bool) or not isinstance(start, int) or start < 1:
            raise ValueError(f"Sequence start must be a positive integer, got {start!r}")
        return start

    def format(self, counter: int) -> str:
        return f"{self.prefix}{counter:0{COUNTER_DIGITS}d}"

    def parse(self, invoice_number: str) -> int:
        """Extract the counter from a number carrying this sequencer's prefix"""
        if not invoice_number.startswith(self.prefix):
            raise ValueError(f"Invoice number {invoice_number!r} does not match prefix {self.prefix!r}")
        counter = invoice_number[len(self.prefix):]
        if len(counter) != COUNTER_DIGITS or not counter.isdigit():
            raise ValueError(f"Invoice number {invoice_number!r} has a malformed counter")
        return int(counter)

    def next_number(self) -> str:
        """Allocate and return the next invoice number"""
        with self._lock:
            counter = self._next
            if counter > MAX_COUNTER:
                raise SequenceExhaustedError(f"Invoice sequence {self.prefix} is exhausted")
            self._next = counter + 1
        return self.format(counter)

    def peek(self) -> str:
        """Return the number the next allocation would produce, without consuming it"""
        with self._lock:
            counter = self._next
        return self.format(counter)

    @property
    def next_counter(self) -> int:
        with self._lock:
            return self._next

    def reset(self, start: int = 1) -> None:
        """Restart the counter (tests and explicit re-initialization only)"""
        start = self._validate_start(start)
        with self._lock:
            self._next = start
        logger.info(f"Invoice sequence {self.prefix} reset to {start}")

    def resume_from(self, last_invoice_number: str) -> None:
        """
        Move the counter past an already issued number

        Never moves the counter backwards.
        """
        last = self.parse(last_invoice_number)
        with self._lock:
            if last + 1 > self._next:
                self._next = last + 1
        logger.info(f"Invoice sequence {self.prefix} resumed after {last_invoice_number}")
