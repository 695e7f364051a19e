"""Cross-cutting concerns: errors and logging."""

from staffgate.core.errors import (
    AliasConfigError,
    MatrixValidationError,
    PermissionDeniedError,
    StaffgateError,
)
from staffgate.core.logging import configure_logging


__all__ = [
    "AliasConfigError",
    "MatrixValidationError",
    "PermissionDeniedError",
    "StaffgateError",
    "configure_logging",
]
