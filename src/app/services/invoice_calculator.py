"""Invoice Calculator

Derives line subtotals and the ISV breakdown of an invoice from catalog data.

Prices of taxable services are ISV-inclusive, so the tax is backed out of
each line:

    net = round2(line_subtotal / (1 + tax_rate))
    tax = line_subtotal - net

Rounding is applied per line before aggregation, which keeps
``total == sum(line_subtotal)`` exact.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Mapping, Optional, Sequence, Union
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.domain.money import round2, to_decimal
from src.domain.service import Service

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class LineInput:
    """Requested line: catalog reference and quantity (price is never trusted)"""

    service_id: str
    quantity: Union[int, Decimal, float]


@dataclass(frozen=True)
class CalculatedLine:
    service_id: str
    description: str
    unit_price: Decimal
    quantity: int
    line_subtotal: Decimal
    taxable: bool
    net_amount: Decimal
    tax_amount: Decimal


@dataclass(frozen=True)
class InvoiceCalculation:
    lines: List[CalculatedLine] = field(default_factory=list)
    subtotal_exempt: Decimal = ZERO
    subtotal_taxable_net: Decimal = ZERO
    tax_amount: Decimal = ZERO
    total: Decimal = ZERO
    tax_rate: Decimal = ZERO


def coerce_quantity(quantity) -> Optional[int]:
    """Return quantity as a positive int, or None if it is not one"""
    if isinstance(quantity, bool):
        return None
    if isinstance(quantity, int):
        value = quantity
    elif isinstance(quantity, (Decimal, float)):
        try:
            as_decimal = to_decimal(quantity)
            if not as_decimal.is_finite() or as_decimal != as_decimal.to_integral_value():
                return None
            value = int(as_decimal)
        except (InvalidOperation, ValueError):
            return None
    else:
        return None
    return value if value > 0 else None


class InvoiceCalculator:
    """
    Computes invoice totals with the tax-inclusive back-out model

    Business Rules:
    1. At least one line is required (EMPTY_INVOICE)
    2. Every service id must resolve in the catalog passed in (UNKNOWN_SERVICE)
    3. Quantities are positive integers (INVALID_QUANTITY)
    4. Any error aborts the whole computation
    """

    def __init__(self, tax_rate: Union[Decimal, str, float] = Decimal("0.15")):
        rate = to_decimal(tax_rate)
        if rate < 0:
            raise ValueError(f"Tax rate must be non-negative, got {rate}")
        self.tax_rate = rate

    def split_tax(self, line_subtotal: Decimal):
        """Back ISV out of a tax-inclusive amount, returns (net, tax)"""
        net = round2(line_subtotal / (Decimal(1) + self.tax_rate))
        return net, line_subtotal - net

    def calculate(
        self,
        items: Sequence[LineInput],
        catalog: Mapping[str, Service],
    ) -> Result[InvoiceCalculation]:
        """
        Calculate lines and totals

        Args:
            items: Ordered requested lines
            catalog: Current services keyed by id, as read at commit time

        Returns:
            Result[InvoiceCalculation]: Breakdown or the first rule violation
        """
        if not items:
            return Return.err(
                Error(
                    code=ErrorCode.EMPTY_INVOICE,
                    message="Invoice must contain at least one item",
                    reason="No line items supplied",
                )
            )

        lines: List[CalculatedLine] = []
        subtotal_exempt = ZERO
        subtotal_taxable_net = ZERO
        tax_amount = ZERO

        for index, item in enumerate(items):
            service = catalog.get(item.service_id)
            if service is None or service.is_deleted:
                return Return.err(
                    Error(
                        code=ErrorCode.UNKNOWN_SERVICE,
                        message=f"Service with ID {item.service_id} not found",
                        reason=f"line={index}",
                    )
                )

            quantity = coerce_quantity(item.quantity)
            if quantity is None:
                return Return.err(
                    Error(
                        code=ErrorCode.INVALID_QUANTITY,
                        message=f"Quantity must be a positive integer, got {item.quantity}",
                        reason=f"line={index}, service_id={item.service_id}",
                    )
                )

            unit_price = round2(service.price)
            line_subtotal = round2(unit_price * quantity)

            if service.taxable:
                net, tax = self.split_tax(line_subtotal)
                subtotal_taxable_net += net
                tax_amount += tax
            else:
                net, tax = line_subtotal, ZERO
                subtotal_exempt += line_subtotal

            lines.append(
                CalculatedLine(
                    service_id=service.id,
                    description=service.description,
                    unit_price=unit_price,
                    quantity=quantity,
                    line_subtotal=line_subtotal,
                    taxable=service.taxable,
                    net_amount=net,
                    tax_amount=tax,
                )
            )

        return Return.ok(
            InvoiceCalculation(
                lines=lines,
                subtotal_exempt=subtotal_exempt,
                subtotal_taxable_net=subtotal_taxable_net,
                tax_amount=tax_amount,
                total=subtotal_exempt + subtotal_taxable_net + tax_amount,
                tax_rate=self.tax_rate,
            )
        )
