"""SQLAlchemy Service Repository Implementation

Implements catalog persistence using SQLAlchemy async session.
"""

from typing import Dict, List, Optional, Sequence
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.service_repository import ServiceRepository
from src.domain.base import utcnow
from src.domain.service import Service


class SqlAlchemyServiceRepository(ServiceRepository):
    """
    SQLAlchemy implementation of ServiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _active(self):
        return select(Service).where(Service.deleted_at.is_(None))

    async def create(self, service: Service) -> Service:
        self.session.add(service)
        await self.session.flush()
        await self.session.refresh(service)
        return service

    async def get_by_id(self, service_id: str) -> Optional[Service]:
        statement = self._active().where(Service.id == service_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Optional[Service]:
        statement = self._active().where(Service.code == code)
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def get_by_ids(self, service_ids: Sequence[str]) -> Dict[str, Service]:
        unique_ids = set(service_ids)
        if not unique_ids:
            return {}

        statement = self._active().where(Service.id.in_(unique_ids))
        result = await self.session.execute(statement)
        return {service.id: service for service in result.scalars().all()}

    async def list_all(self, category: Optional[str] = None) -> List[Service]:
        statement = self._active()

        if category:
            statement = statement.where(Service.category == category)

        statement = statement.order_by(Service.code)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, service: Service) -> Service:
        self.session.add(service)
        await self.session.flush()
        await self.session.refresh(service)
        return service

    async def delete(self, service_id: str) -> bool:
        service = await self.get_by_id(service_id)
        if service is None:
            return False

        service.deleted_at = utcnow()
        self.session.add(service)
        await self.session.flush()
        return True

    async def count(self) -> int:
        statement = (
            select(func.count())
            .select_from(Service)
            .where(Service.deleted_at.is_(None))
        )
        result = await self.session.execute(statement)
        return result.scalar_one()
