"""Error codes returned by use cases

Use cases report failures as ``Result`` errors. The API layer maps these
codes to HTTP status codes.
"""


class ErrorCode:
    # Caller input is malformed (RTN, client name, ...)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Invoice business rules
    UNKNOWN_SERVICE = "UNKNOWN_SERVICE"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    EMPTY_INVOICE = "EMPTY_INVOICE"

    # Lookups
    INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
    SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"
    CLIENT_NOT_FOUND = "CLIENT_NOT_FOUND"

    # Uniqueness
    SERVICE_ALREADY_EXISTS = "SERVICE_ALREADY_EXISTS"
    CLIENT_ALREADY_EXISTS = "CLIENT_ALREADY_EXISTS"

    # Persistence collaborator failed
    STORAGE_FAILURE = "STORAGE_FAILURE"

    BUSINESS_RULE_ERRORS = frozenset({UNKNOWN_SERVICE, INVALID_QUANTITY, EMPTY_INVOICE})
    NOT_FOUND_ERRORS = frozenset({INVOICE_NOT_FOUND, SERVICE_NOT_FOUND, CLIENT_NOT_FOUND})
    CONFLICT_ERRORS = frozenset({SERVICE_ALREADY_EXISTS, CLIENT_ALREADY_EXISTS})
