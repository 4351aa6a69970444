import logging
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to one AsyncSession (one request)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        try:
            await self.session.commit()
        except Exception:
            # A failed commit leaves the session unusable until rolled back
            await self.session.rollback()
            logger.warning("Commit failed, session rolled back")
            raise

    async def rollback(self):
        await self.session.rollback()
