"""Unit tests for InvoiceCalculator

Tests cover:
- ISV back-out per line (tax-inclusive prices)
- Mixed taxable / exempt invoices
- Total equals the sum of line subtotals
- Rule violations: empty invoice, unknown service, invalid quantity
"""

from decimal import Decimal

import pytest

from src.app.errors import ErrorCode
from src.app.services.invoice_calculator import (
    InvoiceCalculator,
    LineInput,
    coerce_quantity,
)


@pytest.fixture
def calculator():
    return InvoiceCalculator(tax_rate=Decimal("0.15"))


class TestTaxBackOut:
    def test_single_taxable_line(self, calculator, make_service):
        """
        Given: A taxable service priced 115.00 (ISV included)
        When: One unit is invoiced
        Then: 100.00 net and 15.00 ISV are backed out of the line
        """
        service = make_service(price="115.00", taxable=True)

        result = calculator.calculate([LineInput("svc-1", 1)], {"svc-1": service})

        assert result.is_ok()
        calculation = result.value
        line = calculation.lines[0]
        assert line.line_subtotal == Decimal("115.00")
        assert line.net_amount == Decimal("100.00")
        assert line.tax_amount == Decimal("15.00")
        assert calculation.subtotal_exempt == Decimal("0.00")
        assert calculation.subtotal_taxable_net == Decimal("100.00")
        assert calculation.tax_amount == Decimal("15.00")
        assert calculation.total == Decimal("115.00")

    def test_mixed_taxable_and_exempt_lines(self, calculator, make_service):
        catalog = {
            "svc-1": make_service(service_id="svc-1", price="115.00", taxable=True),
            "svc-2": make_service(service_id="svc-2", code="EXE001", price="50.00", taxable=False),
        }

        result = calculator.calculate(
            [LineInput("svc-1", 1), LineInput("svc-2", 2)], catalog
        )

        assert result.is_ok()
        calculation = result.value
        assert calculation.subtotal_exempt == Decimal("100.00")
        assert calculation.subtotal_taxable_net == Decimal("100.00")
        assert calculation.tax_amount == Decimal("15.00")
        assert calculation.total == Decimal("215.00")
        assert calculation.lines[1].net_amount == Decimal("100.00")
        assert calculation.lines[1].tax_amount == Decimal("0.00")

    def test_net_plus_tax_equals_line_subtotal_for_awkward_prices(self, calculator, make_service):
        """Rounding never loses a cent between net and tax"""
        prices = ["0.01", "0.99", "1.00", "33.33", "99.99", "150.00", "249.95"]
        catalog = {
            f"svc-{i}": make_service(service_id=f"svc-{i}", code=f"C{i}", price=price)
            for i, price in enumerate(prices)
        }
        items = [LineInput(f"svc-{i}", i + 1) for i in range(len(prices))]

        result = calculator.calculate(items, catalog)

        assert result.is_ok()
        calculation = result.value
        for line in calculation.lines:
            assert line.net_amount + line.tax_amount == line.line_subtotal
        assert calculation.total == sum(line.line_subtotal for line in calculation.lines)
        assert (
            calculation.subtotal_exempt
            + calculation.subtotal_taxable_net
            + calculation.tax_amount
            == calculation.total
        )

    def test_rounding_is_half_up_per_line(self, calculator, make_service):
        # 1.00 / 1.15 = 0.8695... -> 0.87 net, 0.13 tax
        result = calculator.calculate(
            [LineInput("svc-1", 1)], {"svc-1": make_service(price="1.00")}
        )

        line = result.value.lines[0]
        assert line.net_amount == Decimal("0.87")
        assert line.tax_amount == Decimal("0.13")

    def test_line_snapshot_comes_from_catalog(self, calculator, make_service):
        service = make_service(description="Encerado y Brillado", price="150.00")

        result = calculator.calculate([LineInput("svc-1", 3)], {"svc-1": service})

        line = result.value.lines[0]
        assert line.service_id == "svc-1"
        assert line.description == "Encerado y Brillado"
        assert line.unit_price == Decimal("150.00")
        assert line.quantity == 3
        assert line.line_subtotal == Decimal("450.00")

    def test_tax_rate_is_configurable(self, make_service):
        calculator = InvoiceCalculator(tax_rate="0.18")

        result = calculator.calculate(
            [LineInput("svc-1", 1)], {"svc-1": make_service(price="118.00")}
        )

        assert result.value.tax_rate == Decimal("0.18")
        assert result.value.subtotal_taxable_net == Decimal("100.00")
        assert result.value.tax_amount == Decimal("18.00")

    def test_zero_rate_leaves_no_tax(self, make_service):
        calculator = InvoiceCalculator(tax_rate=0)

        result = calculator.calculate(
            [LineInput("svc-1", 2)], {"svc-1": make_service(price="115.00")}
        )

        assert result.value.tax_amount == Decimal("0.00")
        assert result.value.subtotal_taxable_net == Decimal("230.00")

    def test_negative_rate_is_rejected(self):
        with pytest.raises(ValueError):
            InvoiceCalculator(tax_rate="-0.01")


class TestRuleViolations:
    def test_empty_invoice(self, calculator):
        result = calculator.calculate([], {})

        assert result.is_err()
        assert result.error.code == ErrorCode.EMPTY_INVOICE

    def test_unknown_service(self, calculator, make_service):
        result = calculator.calculate(
            [LineInput("svc-1", 1), LineInput("missing", 1)],
            {"svc-1": make_service()},
        )

        assert result.is_err()
        assert result.error.code == ErrorCode.UNKNOWN_SERVICE
        assert result.error.reason == "line=1"

    def test_deleted_service_is_unknown(self, calculator, make_service):
        result = calculator.calculate(
            [LineInput("svc-1", 1)], {"svc-1": make_service(deleted=True)}
        )

        assert result.is_err()
        assert result.error.code == ErrorCode.UNKNOWN_SERVICE

    @pytest.mark.parametrize("quantity", [0, -1, Decimal("1.5"), 2.5, True, "2"])
    def test_invalid_quantity(self, calculator, make_service, quantity):
        result = calculator.calculate(
            [LineInput("svc-1", quantity)], {"svc-1": make_service()}
        )

        assert result.is_err()
        assert result.error.code == ErrorCode.INVALID_QUANTITY

    def test_unknown_service_reported_before_bad_quantity(self, calculator):
        result = calculator.calculate([LineInput("missing", 0)], {})

        assert result.error.code == ErrorCode.UNKNOWN_SERVICE


class TestCoerceQuantity:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, 1),
            (12, 12),
            (Decimal("3"), 3),
            (Decimal("3.00"), 3),
            (4.0, 4),
            (0, None),
            (Decimal("NaN"), None),
            (float("inf"), None),
            (None, None),
            (False, None),
        ],
    )
    def test_coerce_quantity(self, value, expected):
        assert coerce_quantity(value) == expected
