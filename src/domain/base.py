"""Base classes shared by all domain entities"""

from datetime import datetime, timezone
from uuid import uuid4
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Generate a string UUID4 primary key"""
    return str(uuid4())


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (timestamps are stored naive, in UTC)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModel(SQLModel):
    """Base model for persisted domain entities"""
    pass
