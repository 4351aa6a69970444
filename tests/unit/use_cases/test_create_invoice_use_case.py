"""Unit tests for CreateInvoice use case

Tests cover:
- Successful issue with catalog snapshot and ISV breakdown
- Client validation (RTN, name)
- Business rule violations abort without writes
- Storage failures roll back
"""

from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.errors import ErrorCode
from src.app.services.invoice_calculator import InvoiceCalculator
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO, InvoiceItemDTO
from src.domain.client import Client


@pytest.fixture
def mock_service_repo():
    return MagicMock()


@pytest.fixture
def mock_client_repo():
    repo = MagicMock()

    async def upsert(rtn, name):
        return Client(id="client-1", rtn=rtn, name=name)

    repo.upsert_if_absent = AsyncMock(side_effect=upsert)
    return repo


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()

    async def create(invoice, lines):
        invoice.invoice_number = "001-001-01-000000001"
        invoice.created_at = datetime(2025, 8, 8, 15, 30, 0)
        for position, line in enumerate(lines):
            line.invoice_id = invoice.id
            line.position = position
        return invoice

    repo.create = AsyncMock(side_effect=create)
    return repo


@pytest.fixture
def create_invoice_use_case(mock_uow, mock_service_repo, mock_client_repo, mock_invoice_repo):
    return CreateInvoice(
        uow=mock_uow,
        service_repo=mock_service_repo,
        client_repo=mock_client_repo,
        invoice_repo=mock_invoice_repo,
        calculator=InvoiceCalculator(tax_rate=Decimal("0.15")),
    )


def make_command(items, rtn="08011999123456", name="Juan Pérez"):
    return CreateInvoiceCommandDTO(
        client_rtn=rtn,
        client_name=name,
        items=[InvoiceItemDTO(service_id=sid, quantity=qty) for sid, qty in items],
    )


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:
    async def test_issue_invoice_with_mixed_lines(
        self, create_invoice_use_case, mock_service_repo, mock_invoice_repo, mock_uow, make_service
    ):
        """
        Given: A taxable 115.00 service and an exempt 50.00 service
        When: Both are invoiced (1 and 2 units)
        Then: Invoice totals 215.00 with 15.00 ISV and is committed
        """
        # Arrange
        mock_service_repo.get_by_ids = AsyncMock(
            return_value={
                "svc-1": make_service(service_id="svc-1", price="115.00", taxable=True),
                "svc-2": make_service(
                    service_id="svc-2", code="EXE001", description="Aromatizante",
                    price="50.00", taxable=False,
                ),
            }
        )

        # Act
        result = await create_invoice_use_case.execute(
            make_command([("svc-1", 1), ("svc-2", 2)])
        )

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.invoice_number == "001-001-01-000000001"
        assert response.client_rtn == "08011999123456"
        assert response.client_name == "Juan Pérez"
        assert response.subtotal_exempt == Decimal("100.00")
        assert response.subtotal_taxable_net == Decimal("100.00")
        assert response.tax_amount == Decimal("15.00")
        assert response.total == Decimal("215.00")
        assert response.tax_rate == Decimal("0.15")
        assert [line.description for line in response.line_items] == [
            "Lavado Completo Premium",
            "Aromatizante",
        ]

        mock_invoice_repo.create.assert_called_once()
        mock_uow.commit.assert_called_once()
        mock_uow.rollback.assert_not_called()

    async def test_lines_keep_request_order(
        self, create_invoice_use_case, mock_service_repo, mock_invoice_repo, make_service
    ):
        mock_service_repo.get_by_ids = AsyncMock(
            return_value={
                "a": make_service(service_id="a", code="A"),
                "b": make_service(service_id="b", code="B"),
            }
        )

        await create_invoice_use_case.execute(make_command([("b", 1), ("a", 1), ("b", 2)]))

        _, lines = mock_invoice_repo.create.call_args.args
        assert [line.service_id for line in lines] == ["b", "a", "b"]
        assert [line.position for line in lines] == [0, 1, 2]

    async def test_existing_client_name_is_kept(
        self, create_invoice_use_case, mock_service_repo, mock_client_repo, make_service
    ):
        """The invoice carries the cached client's name, not the new spelling"""
        mock_service_repo.get_by_ids = AsyncMock(return_value={"svc-1": make_service()})
        mock_client_repo.upsert_if_absent = AsyncMock(
            return_value=Client(id="client-1", rtn="08011999123456", name="Juan Pérez")
        )

        result = await create_invoice_use_case.execute(
            make_command([("svc-1", 1)], name="JUAN PEREZ S.A.")
        )

        assert result.value.client_name == "Juan Pérez"

    async def test_rtn_and_name_are_trimmed(
        self, create_invoice_use_case, mock_service_repo, mock_client_repo, make_service
    ):
        mock_service_repo.get_by_ids = AsyncMock(return_value={"svc-1": make_service()})

        await create_invoice_use_case.execute(
            make_command([("svc-1", 1)], rtn=" 08011999123456 ", name="  Ana  ")
        )

        mock_client_repo.upsert_if_absent.assert_called_once_with("08011999123456", "Ana")


@pytest.mark.asyncio
class TestCreateInvoiceValidation:
    @pytest.mark.parametrize("rtn", ["", "123", "0801199912345X", "080119991234567"])
    async def test_invalid_rtn(self, create_invoice_use_case, mock_service_repo, rtn):
        mock_service_repo.get_by_ids = AsyncMock()

        result = await create_invoice_use_case.execute(make_command([("svc-1", 1)], rtn=rtn))

        assert result.is_err()
        assert result.error.code == ErrorCode.VALIDATION_ERROR
        mock_service_repo.get_by_ids.assert_not_called()

    async def test_blank_client_name(self, create_invoice_use_case):
        result = await create_invoice_use_case.execute(make_command([("svc-1", 1)], name="   "))

        assert result.is_err()
        assert result.error.code == ErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
class TestCreateInvoiceBusinessRules:
    async def test_empty_invoice(
        self, create_invoice_use_case, mock_service_repo, mock_invoice_repo, mock_uow
    ):
        mock_service_repo.get_by_ids = AsyncMock(return_value={})

        result = await create_invoice_use_case.execute(make_command([]))

        assert result.is_err()
        assert result.error.code == ErrorCode.EMPTY_INVOICE
        mock_invoice_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_unknown_service_writes_nothing(
        self, create_invoice_use_case, mock_service_repo, mock_client_repo,
        mock_invoice_repo, mock_uow, make_service
    ):
        mock_service_repo.get_by_ids = AsyncMock(return_value={"svc-1": make_service()})

        result = await create_invoice_use_case.execute(
            make_command([("svc-1", 1), ("svc-404", 1)])
        )

        assert result.is_err()
        assert result.error.code == ErrorCode.UNKNOWN_SERVICE
        mock_client_repo.upsert_if_absent.assert_not_called()
        mock_invoice_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_invalid_quantity(
        self, create_invoice_use_case, mock_service_repo, mock_invoice_repo, make_service
    ):
        mock_service_repo.get_by_ids = AsyncMock(return_value={"svc-1": make_service()})

        result = await create_invoice_use_case.execute(make_command([("svc-1", 0)]))

        assert result.is_err()
        assert result.error.code == ErrorCode.INVALID_QUANTITY
        mock_invoice_repo.create.assert_not_called()

    @pytest.mark.parametrize("quantity", [True, False])
    async def test_boolean_quantity_is_rejected(
        self, create_invoice_use_case, mock_service_repo, mock_invoice_repo, make_service, quantity
    ):
        """
        Given: A line whose quantity is a boolean
        When: The invoice is computed
        Then: The boolean is not read as 1 or 0 but rejected as INVALID_QUANTITY
        """
        mock_service_repo.get_by_ids = AsyncMock(return_value={"svc-1": make_service()})
        command = make_command([("svc-1", quantity)])
        assert command.items[0].quantity is quantity

        result = await create_invoice_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == ErrorCode.INVALID_QUANTITY
        mock_invoice_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestCreateInvoiceStorageFailure:
    async def test_repository_error_rolls_back(
        self, create_invoice_use_case, mock_service_repo, mock_invoice_repo, mock_uow, make_service
    ):
        mock_service_repo.get_by_ids = AsyncMock(return_value={"svc-1": make_service()})
        mock_invoice_repo.create = AsyncMock(side_effect=Exception("disk full"))

        result = await create_invoice_use_case.execute(make_command([("svc-1", 1)]))

        assert result.is_err()
        assert result.error.code == ErrorCode.STORAGE_FAILURE
        assert "disk full" in result.error.reason
        mock_uow.rollback.assert_called()
        mock_uow.commit.assert_not_called()
