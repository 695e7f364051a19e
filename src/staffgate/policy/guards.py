"""Permission decorators for service functions.

Decorated functions receive the caller's ``StaffAccess`` as the keyword
argument ``access``. The guards only turn evaluator denials into
``PermissionDeniedError``; they never allow anything the evaluator denies.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import structlog

from staffgate.core.errors import PermissionDeniedError
from staffgate.policy.access import StaffAccess


logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")

Requirement = tuple[Any, Any]


def _label(module: Any, action: Any) -> str:
    return f"{getattr(module, 'value', module)}:{getattr(action, 'value', action)}"


def _get_access(kwargs: dict[str, Any]) -> StaffAccess:
    """Extract the access context from keyword arguments.

    Raises:
        PermissionDeniedError: If no ``StaffAccess`` was passed
    """
    access = cast("StaffAccess | None", kwargs.get("access"))
    if not isinstance(access, StaffAccess):
        raise PermissionDeniedError(
            "Access context required",
            error_code="access_required",
        )
    return access


def _guard(
    permissions: list[Requirement],
    require_all: bool,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            access = _get_access(kwargs)

            checks = (access.has_permission(m, a) for m, a in permissions)
            allowed = all(checks) if require_all else any(checks)

            if not allowed:
                perm_strs = [_label(m, a) for m, a in permissions]
                logger.warning(
                    "permission_denied",
                    staff_id=access.staff_id,
                    role=access.role.value,
                    permissions=perm_strs,
                    function=func.__qualname__,
                )
                if require_all:
                    message = f"Missing required permissions: {', '.join(perm_strs)}"
                else:
                    message = (
                        f"Missing required permission. Need one of: {', '.join(perm_strs)}"
                    )
                raise PermissionDeniedError(
                    message,
                    details={
                        "role": access.role.value,
                        "required_permissions": perm_strs,
                    },
                )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def require_permission(
    module: Any, action: Any
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that requires a specific permission.

    Usage:
        @require_permission(Module.INVOICES, Action.DELETE)
        def delete_invoice(invoice_id: str, *, access: StaffAccess) -> None:
            ...

    Raises:
        PermissionDeniedError: If the caller lacks the permission
    """
    return _guard([(module, action)], require_all=True)


def require_any_permission(
    permissions: list[Requirement],
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that requires any one of the listed permissions.

    Usage:
        @require_any_permission(
            [(Module.REPORTS_FINANCE, Action.VIEW), (Module.REVENUE, Action.VIEW)]
        )
        def finance_summary(*, access: StaffAccess) -> dict:
            ...
    """
    return _guard(list(permissions), require_all=False)


def require_all_permissions(
    permissions: list[Requirement],
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that requires every listed permission.

    Usage:
        @require_all_permissions(
            [(Module.CONTRACTS, Action.CREATE), (Module.INVOICES, Action.CREATE)]
        )
        def enrol_with_invoice(*, access: StaffAccess) -> None:
            ...
    """
    return _guard(list(permissions), require_all=True)
