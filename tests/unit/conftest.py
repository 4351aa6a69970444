from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.service import Service


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def make_service():
    """Factory for catalog services"""
    def _make(service_id="svc-1", code="LAV001", description="Lavado Completo Premium",
              price="115.00", taxable=True, category="Lavado", deleted=False):
        return Service(
            id=service_id,
            code=code,
            description=description,
            price=Decimal(price),
            category=category,
            taxable=taxable,
            stock=-1,
            created_at=datetime(2025, 8, 8, 10, 0, 0),
            deleted_at=datetime(2025, 8, 9, 10, 0, 0) if deleted else None,
        )
    return _make
