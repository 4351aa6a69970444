"""SeedCatalog Use Case

Loads the default car-wash services into an empty catalog.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.service_repository import ServiceRepository
from src.domain.service import Service, UNLIMITED_STOCK

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    {"code": "LAV001", "description": "Lavado Completo Premium", "price": Decimal("250.00"), "category": "Lavado"},
    {"code": "LAV002", "description": "Lavado Básico", "price": Decimal("150.00"), "category": "Lavado"},
    {"code": "ENC001", "description": "Encerado y Brillado", "price": Decimal("150.00"), "category": "Detailing"},
    {"code": "INT001", "description": "Limpieza Interior", "price": Decimal("100.00"), "category": "Interior"},
]


class SeedCatalog:
    """
    Use Case: Seed default catalog

    Does nothing when the catalog already holds at least one active service.
    Returns the number of services created.
    """

    def __init__(self, uow: UnitOfWork, service_repo: ServiceRepository):
        self.uow = uow
        self.service_repo = service_repo

    async def execute(self) -> Result[int]:
        try:
            if await self.service_repo.count() > 0:
                return Return.ok(0)

            for entry in DEFAULT_SERVICES:
                await self.service_repo.create(
                    Service(taxable=True, stock=UNLIMITED_STOCK, **entry)
                )

            await self.uow.commit()
            logger.info(f"Seeded catalog with {len(DEFAULT_SERVICES)} default services")
            return Return.ok(len(DEFAULT_SERVICES))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=ErrorCode.STORAGE_FAILURE,
                    message="Failed to seed catalog",
                    reason=str(e),
                )
            )
