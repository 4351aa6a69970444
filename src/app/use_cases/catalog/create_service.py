"""CreateService Use Case

Adds a service or product to the catalog.
"""

import logging
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.service_repository import ServiceRepository
from src.domain.money import round2
from src.domain.service import Service
from ._text import strip_text_fields
from .dtos import CreateServiceCommandDTO, ServiceResponseDTO, to_service_dto

logger = logging.getLogger(__name__)


class CreateService:
    """
    Use Case: Add catalog service

    Business Rules:
    1. code is unique among active services
    2. code, description and category are trimmed and must not be blank
    3. price is stored rounded to cents
    """

    def __init__(self, uow: UnitOfWork, service_repo: ServiceRepository):
        self.uow = uow
        self.service_repo = service_repo

    async def execute(self, command: CreateServiceCommandDTO) -> Result[ServiceResponseDTO]:
        text = {
            "code": command.code,
            "description": command.description,
            "category": command.category,
        }
        blank = strip_text_fields(text)
        if blank:
            return Return.err(blank)
        code = text["code"]

        try:
            existing = await self.service_repo.get_by_code(code)
            if existing:
                return Return.err(
                    Error(
                        code=ErrorCode.SERVICE_ALREADY_EXISTS,
                        message=f"Service with code {code} already exists",
                        reason=f"existing_id={existing.id}",
                    )
                )

            service = await self.service_repo.create(
                Service(
                    code=code,
                    description=text["description"],
                    price=round2(command.price),
                    category=text["category"],
                    taxable=command.taxable,
                    stock=command.stock,
                )
            )

            await self.uow.commit()
            logger.info(f"Service {service.code} added to catalog (id={service.id})")

            return Return.ok(to_service_dto(service))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to create service",
                    reason=str(e),
                )
            )
