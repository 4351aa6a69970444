from typing import Dict, Optional
from libs.result import Error
from src.app.errors import ErrorCode

TEXT_FIELDS = ("code", "description", "category")


def strip_text_fields(values: Dict[str, object]) -> Optional[Error]:
    """Strip the catalog text fields present in values, in place

    Returns a VALIDATION_ERROR for the first one left blank, else None.
    """
    for field_name in TEXT_FIELDS:
        if field_name not in values:
            continue
        values[field_name] = values[field_name].strip()
        if not values[field_name]:
            return Error(
                code=ErrorCode.VALIDATION_ERROR,
                message=f"Service {field_name} must not be blank",
                reason=f"{field_name} is empty after trimming whitespace",
            )
    return None
