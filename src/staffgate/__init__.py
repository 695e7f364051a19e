"""Staff portal authorization engine."""

from staffgate.config import Settings, get_settings
from staffgate.core.errors import (
    AliasConfigError,
    MatrixValidationError,
    PermissionDeniedError,
    StaffgateError,
)
from staffgate.core.logging import configure_logging
from staffgate.policy import (
    Action,
    Directive,
    MenuGroup,
    Module,
    ModulePermission,
    Role,
    StaffAccess,
    StaffRecord,
    can_approve,
    can_create,
    can_delete,
    can_edit,
    can_view,
    evaluate,
    permission_for,
    require_permission,
    requires_approval,
    resolve_role,
    should_hide_sensitive_field,
    should_restrict_to_own_records,
    visible_menu,
    visible_modules,
)
from staffgate.policy.matrix import DEFAULT_MATRIX
from staffgate.policy.resolver import AliasTable, get_alias_table


__version__ = "0.1.0"


def init_policy() -> AliasTable:
    """Load and check the policy at process start-up.

    Configures logging, re-validates the default matrix and loads the
    alias table so configuration errors surface before the first request.

    Returns:
        The process-wide alias table.

    Raises:
        MatrixValidationError: If the default matrix is invalid
        AliasConfigError: If the configured alias file cannot be loaded
    """
    configure_logging(get_settings())
    DEFAULT_MATRIX.validate()
    return get_alias_table()


__all__ = [
    "Action",
    "AliasConfigError",
    "Directive",
    "MatrixValidationError",
    "MenuGroup",
    "Module",
    "ModulePermission",
    "PermissionDeniedError",
    "Role",
    "Settings",
    "StaffAccess",
    "StaffRecord",
    "StaffgateError",
    "__version__",
    "can_approve",
    "can_create",
    "can_delete",
    "can_edit",
    "can_view",
    "configure_logging",
    "evaluate",
    "get_settings",
    "init_policy",
    "permission_for",
    "require_permission",
    "requires_approval",
    "resolve_role",
    "should_hide_sensitive_field",
    "should_restrict_to_own_records",
    "visible_menu",
    "visible_modules",
]
