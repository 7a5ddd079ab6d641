class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmployeeNotFoundError(DomainError):
    """Raised when an attendance action targets an unknown employee."""


class AlreadyAtWorkError(DomainError):
    """Raised on clock-in while the employee still has an open record."""


class AbsentEmployeeError(DomainError):
    """Raised on clock-out when there is no open record for today."""
