"""Exceptions raised at the edges of the policy engine.

Permission queries never raise; a denial is a ``False`` answer. These
exceptions cover the two places where failing loudly is correct: start-up
(a broken matrix or alias file) and the optional guard decorators that turn
a denial into an exception for service code.
"""

from typing import Any


class StaffgateError(Exception):
    """Base exception for configuration and guard failures.

    Never raised by permission queries. The CLI prints ``message`` and each
    ``details`` entry, and service code can branch on ``error_code``
    (``matrix_invalid``, ``alias_config_invalid``, ``access_required`` or
    ``permission_denied``) without matching on the exception class.

    Attributes:
        message: One-line summary shown to operators
        error_code: Stable machine-readable code
        details: Violations, file paths or required permissions
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class MatrixValidationError(StaffgateError):
    """Raised when the permission matrix breaks one of its invariants.

    Example:
        raise MatrixValidationError(
            violations=["admin lacks delete on settings"],
        )
    """

    message = "Permission matrix is invalid"
    error_code = "matrix_invalid"

    def __init__(
        self,
        message: str | None = None,
        violations: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        self.violations = list(violations or [])
        if self.violations:
            details["violations"] = self.violations
        super().__init__(message=message, details=details, **kwargs)


class AliasConfigError(StaffgateError):
    """Raised when the operator alias file cannot be loaded.

    Example:
        raise AliasConfigError("Alias file not found", path=str(path))
    """

    message = "Alias configuration is invalid"
    error_code = "alias_config_invalid"

    def __init__(
        self,
        message: str | None = None,
        path: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        super().__init__(message=message, details=details, **kwargs)


class PermissionDeniedError(StaffgateError):
    """Raised by guards when the caller lacks a required permission.

    Example:
        raise PermissionDeniedError(
            "Missing required permissions: invoices:delete",
            details={"required_permissions": ["invoices:delete"]},
        )
    """

    message = "Access forbidden"
    error_code = "permission_denied"
