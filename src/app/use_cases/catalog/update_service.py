"""UpdateService Use Case

Applies a partial update to a catalog service.
Invoices already issued keep their own snapshot of the old values.
"""

import logging
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.service_repository import ServiceRepository
from src.domain.money import round2
from ._text import strip_text_fields
from .dtos import UpdateServiceCommandDTO, ServiceResponseDTO, to_service_dto

logger = logging.getLogger(__name__)


class UpdateService:
    """
    Use Case: Update catalog service

    Business Rules:
    1. Service must exist and not be deleted
    2. Text fields are trimmed and must not be blank
    3. A new code must not collide with another active service
    """

    def __init__(self, uow: UnitOfWork, service_repo: ServiceRepository):
        self.uow = uow
        self.service_repo = service_repo

    async def execute(
        self, service_id: str, command: UpdateServiceCommandDTO
    ) -> Result[ServiceResponseDTO]:
        changes = command.model_dump(exclude_unset=True, exclude_none=True)
        blank = strip_text_fields(changes)
        if blank:
            return Return.err(blank)

        try:
            service = await self.service_repo.get_by_id(service_id)
            if not service:
                return Return.err(
                    Error(
                        code=ErrorCode.SERVICE_NOT_FOUND,
                        message=f"Service with ID {service_id} not found",
                        reason="Service does not exist or was deleted",
                    )
                )

            if "code" in changes:
                if changes["code"] != service.code:
                    clash = await self.service_repo.get_by_code(changes["code"])
                    if clash and clash.id != service.id:
                        return Return.err(
                            Error(
                                code=ErrorCode.SERVICE_ALREADY_EXISTS,
                                message=f"Service with code {changes['code']} already exists",
                                reason=f"existing_id={clash.id}",
                            )
                        )

            if "price" in changes:
                changes["price"] = round2(changes["price"])

            for field_name, value in changes.items():
                setattr(service, field_name, value)

            updated = await self.service_repo.update(service)
            await self.uow.commit()
            logger.info(f"Service {updated.code} updated: {sorted(changes)}")

            return Return.ok(to_service_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to update service",
                    reason=str(e),
                )
            )
