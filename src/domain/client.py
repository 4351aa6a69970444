"""Client Domain Entity

Cached taxpayer identity (RTN + name) seen on invoices.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid, utcnow

RTN_LENGTH = 14


class Client(BaseModel, table=True):
    """
    Client - Taxpayer referenced by invoices

    Domain Rules:
    - rtn is a 14-digit Honduran taxpayer number, unique
    - Created lazily on first sighting of an RTN and never overwritten
    - Not authoritative: invoices keep their own copy of rtn and name
    """

    __tablename__ = "clients"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique client identifier (uuid)"
    )

    rtn: str = Field(
        sa_column=Column(String(RTN_LENGTH), nullable=False, unique=True),
        description="Honduran taxpayer number (14 digits)"
    )

    name: str = Field(
        description="Client legal or display name"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime, nullable=False),
        description="First sighting timestamp (UTC)"
    )


def is_valid_rtn(rtn: str) -> bool:
    """Return True when rtn is exactly 14 ASCII digits"""
    return (
        isinstance(rtn, str)
        and len(rtn) == RTN_LENGTH
        and rtn.isascii()
        and rtn.isdigit()
    )
