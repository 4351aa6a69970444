"""GetService and ListServices Use Cases"""

from typing import Optional
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.service_repository import ServiceRepository
from .dtos import ServiceResponseDTO, ListServicesResponseDTO, to_service_dto


class GetService:
    """Use Case: Retrieve an active service by ID"""

    def __init__(self, service_repo: ServiceRepository):
        self.service_repo = service_repo

    async def execute(self, service_id: str) -> Result[ServiceResponseDTO]:
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
            return Return.ok(to_service_dto(service))

        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to retrieve service",
                    reason=str(e),
                )
            )


class ListServices:
    """Use Case: List the active catalog, optionally by category"""

    def __init__(self, service_repo: ServiceRepository):
        self.service_repo = service_repo

    async def execute(self, category: Optional[str] = None) -> Result[ListServicesResponseDTO]:
        try:
            services = await self.service_repo.list_all(category=category)
            return Return.ok(
                ListServicesResponseDTO(
                    services=[to_service_dto(service) for service in services],
                    total=len(services),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to list services",
                    reason=str(e),
                )
            )
