from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.domain.base import utcnow


def resolve_range(
    date_from: Optional[date], date_to: Optional[date], now: Optional[datetime] = None
) -> Tuple[date, date]:
    """Fill missing bounds with today's date in UTC, the zone created_at is stored in"""
    today = (now or utcnow()).date()
    return date_from or today, date_to or today


def day_range(date_from: date, date_to: date) -> Result[Tuple[datetime, datetime]]:
    """Convert an inclusive day range into a half-open datetime range"""
    if date_from > date_to:
        return Return.err(
            Error(
                code=ErrorCode.VALIDATION_ERROR,
                message="date_from must not be after date_to",
                reason=f"date_from={date_from}, date_to={date_to}",
            )
        )
    return Return.ok(
        (
            datetime.combine(date_from, time.min),
            datetime.combine(date_to + timedelta(days=1), time.min),
        )
    )
