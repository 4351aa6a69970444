"""DeleteService Use Case

Removes a service from the catalog (soft delete).
"""

import logging
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.service_repository import ServiceRepository

logger = logging.getLogger(__name__)


class DeleteService:
    """
    Use Case: Delete catalog service

    The service disappears from the catalog and can no longer be invoiced,
    its code becomes available again, and issued invoices are unaffected.
    """

    def __init__(self, uow: UnitOfWork, service_repo: ServiceRepository):
        self.uow = uow
        self.service_repo = service_repo

    async def execute(self, service_id: str) -> Result[bool]:
        try:
            deleted = await self.service_repo.delete(service_id)
            if not deleted:
                return Return.err(
                    Error(
                        code=ErrorCode.SERVICE_NOT_FOUND,
                        message=f"Service with ID {service_id} not found",
                        reason="Service does not exist or was already deleted",
                    )
                )

            await self.uow.commit()
            logger.info(f"Service {service_id} deleted from catalog")
            return Return.ok(True)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to delete service",
                    reason=str(e),
                )
            )
