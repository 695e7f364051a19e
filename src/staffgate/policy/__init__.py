"""Authorization policy: catalogs, matrix, evaluator and menu visibility."""

from staffgate.policy.access import StaffAccess
from staffgate.policy.catalog import (
    LEAST_PRIVILEGED_ROLE,
    MODULE_GROUPS,
    OFFICE_ROLES,
    TEACHING_ROLES,
    Action,
    Directive,
    MenuGroup,
    Module,
    Role,
    is_admin,
    is_office_staff,
    is_teacher,
)
from staffgate.policy.evaluator import (
    PolicyEvaluator,
    active_directives,
    can_approve,
    can_create,
    can_delete,
    can_edit,
    can_view,
    default_evaluator,
    evaluate,
    permission_for,
    requires_approval,
    should_hide_sensitive_field,
    should_restrict_to_own_records,
)
from staffgate.policy.guards import (
    require_all_permissions,
    require_any_permission,
    require_permission,
)
from staffgate.policy.matrix import (
    DEFAULT_MATRIX,
    ROLE_GRANTS,
    PermissionMatrix,
    build_matrix,
)
from staffgate.policy.menu import (
    is_menu_visible,
    visible_groups,
    visible_menu,
    visible_modules,
)
from staffgate.policy.resolver import (
    BUILTIN_ALIASES,
    AliasTable,
    get_alias_table,
    resolve_position,
    resolve_role,
)
from staffgate.policy.schemas import (
    DENY,
    FULL,
    VIEW_ONLY,
    MenuSection,
    ModulePermission,
    RoleResolution,
    StaffRecord,
)


__all__ = [
    "BUILTIN_ALIASES",
    "DEFAULT_MATRIX",
    "DENY",
    "FULL",
    "LEAST_PRIVILEGED_ROLE",
    "MODULE_GROUPS",
    "OFFICE_ROLES",
    "ROLE_GRANTS",
    "TEACHING_ROLES",
    "VIEW_ONLY",
    "Action",
    "AliasTable",
    "Directive",
    "MenuGroup",
    "MenuSection",
    "Module",
    "ModulePermission",
    "PermissionMatrix",
    "PolicyEvaluator",
    "Role",
    "RoleResolution",
    "StaffAccess",
    "StaffRecord",
    "active_directives",
    "build_matrix",
    "can_approve",
    "can_create",
    "can_delete",
    "can_edit",
    "can_view",
    "default_evaluator",
    "evaluate",
    "get_alias_table",
    "is_admin",
    "is_menu_visible",
    "is_office_staff",
    "is_teacher",
    "permission_for",
    "require_all_permissions",
    "require_any_permission",
    "require_permission",
    "requires_approval",
    "resolve_position",
    "resolve_role",
    "should_hide_sensitive_field",
    "should_restrict_to_own_records",
    "visible_groups",
    "visible_menu",
    "visible_modules",
]
