"""CreateInvoice Use Case

Computes and issues a fiscal invoice from catalog references.
"""

import logging
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.invoice_calculator import InvoiceCalculator, LineInput
from src.app.repositories.service_repository import ServiceRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.client import is_valid_rtn, RTN_LENGTH
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .mappers import to_response_dto

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Issue an invoice

    Business Rules:
    1. Client RTN is 14 digits and client name is not blank
    2. Prices, descriptions and taxable flags are re-read from the catalog
       at commit time; client-supplied values are never used
    3. Totals use the ISV-inclusive back-out model (InvoiceCalculator)
    4. The client is registered on first sighting of its RTN, never renamed
    5. Header and lines are committed together with a fresh invoice number

    Flow:
    1. Validate client data
    2. Resolve referenced services from the catalog
    3. Calculate lines and totals
    4. Upsert client
    5. Persist invoice and lines (number drawn from the sequencer)
    6. Commit transaction
    7. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        service_repo: ServiceRepository,
        client_repo: ClientRepository,
        invoice_repo: InvoiceRepository,
        calculator: InvoiceCalculator,
    ):
        self.uow = uow
        self.service_repo = service_repo
        self.client_repo = client_repo
        self.invoice_repo = invoice_repo
        self.calculator = calculator

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with client data and items

        Returns:
            Result[InvoiceResponseDTO]: Success with the issued invoice or error
        """
        client_rtn = (command.client_rtn or "").strip()
        client_name = (command.client_name or "").strip()

        # Step 1: Validate client data
        if not is_valid_rtn(client_rtn):
            return Return.err(
                Error(
                    code=ErrorCode.VALIDATION_ERROR,
                    message=f"RTN must have exactly {RTN_LENGTH} digits",
                    reason=f"client_rtn={command.client_rtn!r}",
                )
            )

        if not client_name:
            return Return.err(
                Error(
                    code=ErrorCode.VALIDATION_ERROR,
                    message="Client name is required",
                    reason="client_name is blank",
                )
            )

        try:
            # Step 2: Resolve services as they are right now
            catalog = await self.service_repo.get_by_ids(
                [item.service_id for item in command.items]
            )

            # Step 3: Calculate lines and totals
            calculation_result = self.calculator.calculate(
                [LineInput(service_id=item.service_id, quantity=item.quantity) for item in command.items],
                catalog,
            )

            if calculation_result.is_err():
                logger.info(
                    f"Invoice rejected for client {client_rtn}: "
                    f"{calculation_result.error.code} ({calculation_result.error.message})"
                )
                await self.uow.rollback()
                return calculation_result

            calculation = calculation_result.value

            # Step 4: Register client on first sighting
            client = await self.client_repo.upsert_if_absent(client_rtn, client_name)

            # Step 5: Persist header and lines
            invoice = Invoice(
                client_id=client.id,
                client_rtn=client.rtn,
                client_name=client.name,
                subtotal_exempt=calculation.subtotal_exempt,
                subtotal_taxable_net=calculation.subtotal_taxable_net,
                tax_amount=calculation.tax_amount,
                total=calculation.total,
                tax_rate=calculation.tax_rate,
            )

            lines = [
                InvoiceLine(
                    service_id=line.service_id,
                    description=line.description,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    line_subtotal=line.line_subtotal,
                    taxable=line.taxable,
                    net_amount=line.net_amount,
                    tax_amount=line.tax_amount,
                )
                for line in calculation.lines
            ]

            created_invoice = await self.invoice_repo.create(invoice, lines)

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Invoice {created_invoice.invoice_number} issued to {client.rtn}: "
                f"total={calculation.total}, lines={len(lines)}"
            )

            # Step 7: Build response
            return Return.ok(to_response_dto(created_invoice, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice creation failed for client {client_rtn}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
