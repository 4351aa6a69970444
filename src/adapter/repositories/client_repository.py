"""SQLAlchemy Client Repository Implementation

Implements client persistence using SQLAlchemy async session.
"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):
    """SQLAlchemy implementation of ClientRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_id: str) -> Optional[Client]:
        statement = select(Client).where(Client.id == client_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_rtn(self, rtn: str) -> Optional[Client]:
        statement = select(Client).where(Client.rtn == rtn)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def list_all(self) -> List[Client]:
        statement = select(Client).order_by(Client.name)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def upsert_if_absent(self, rtn: str, name: str) -> Client:
        existing = await self.get_by_rtn(rtn)
        if existing is not None:
            return existing
        return await self.create(Client(rtn=rtn, name=name))
