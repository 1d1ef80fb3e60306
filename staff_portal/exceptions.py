"""Domain errors raised by services and rendered by the API layer."""

from typing import Any, Optional


class StaffPortalError(Exception):
    """Base error: carries the HTTP status, a reason code and optional details."""

    status_code = 500
    code = "error"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_error(self) -> dict[str, Any]:
        return {"code": self.code, **self.details}


class ValidationFailure(StaffPortalError):
    status_code = 422
    code = "validation_failed"


class AuthenticationFailed(StaffPortalError):
    status_code = 400
    code = "authentication_failed"


class NotFound(StaffPortalError):
    status_code = 404
    code = "not_found"


class OpeningHoursNotFound(NotFound):
    code = "opening_hours_not_found"


class BusinessRuleViolation(StaffPortalError):
    status_code = 404
    code = "business_rule_violation"


class OutsideOpeningHours(BusinessRuleViolation):
    code = "outside_opening_hours"


class UnexpectedFailure(StaffPortalError):
    status_code = 500
    code = "unexpected_failure"
