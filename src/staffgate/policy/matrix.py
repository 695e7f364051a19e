"""Role x Module permission matrix.

``ROLE_GRANTS`` is the source table. It lists only what each role is
granted; ``build_matrix`` turns it into a total ``PermissionMatrix`` where
every unlisted (role, module) pair holds an explicit ``DENY`` record.

The default matrix is built and validated when this module is imported,
so an edit that breaks an invariant fails start-up instead of silently
changing access.
"""

from collections.abc import Mapping
from types import MappingProxyType

from staffgate.core.errors import MatrixValidationError
from staffgate.policy.catalog import Action, Module, Role
from staffgate.policy.schemas import DENY, FULL, VIEW_ONLY, ModulePermission


Grants = Mapping[Role, Mapping[Module, ModulePermission]]


_OPERATE = ModulePermission(view=True, create=True, edit=True)
_CONTRIBUTE = ModulePermission(view=True, create=True)

# Training staff only see the classes they teach
_OWN_VIEW = ModulePermission(view=True, only_own_records=True)
_OWN_VIEW_REDACTED = ModulePermission(
    view=True, only_own_records=True, hide_sensitive_field=True
)
_OWN_OPERATE = ModulePermission(
    view=True, create=True, edit=True, only_own_records=True
)
_OWN_CONTRIBUTE = ModulePermission(view=True, create=True, only_own_records=True)


_ADMIN_GRANTS: dict[Module, ModulePermission] = {module: FULL for module in Module}

_FRONT_OFFICE_GRANTS: dict[Module, ModulePermission] = {
    Module.DASHBOARD: VIEW_ONLY,
    Module.CLASSES: _OPERATE,
    Module.SCHEDULE: _OPERATE,
    Module.HOLIDAYS: _OPERATE,
    Module.ATTENDANCE: _OPERATE,
    Module.ATTENDANCE_HISTORY: VIEW_ONLY,
    Module.ENROLLMENT_HISTORY: _OPERATE,
    Module.TUTORING: _OPERATE,
    Module.HOMEWORK: _OPERATE,
    Module.RESOURCES: _OPERATE,
    Module.STUDENTS: _OPERATE,
    Module.STUDENTS_RESERVED: _OPERATE,
    Module.STUDENTS_DROPPED: _OPERATE,
    Module.STUDENTS_TRIAL: _OPERATE,
    Module.PARENTS: _OPERATE,
    Module.FEEDBACK: _OPERATE,
    Module.SERVICE_DASHBOARD: VIEW_ONLY,
    Module.LEADS: _OPERATE,
    Module.CAMPAIGNS: _OPERATE,
    Module.STAFF: VIEW_ONLY,
    # Confirms teachers' worked sessions
    Module.WORK_CONFIRMATION: ModulePermission(
        view=True, create=True, edit=True, approve=True
    ),
    Module.CONTRACTS: _OPERATE,
    # Invoice deletions go to an administrator for approval
    Module.INVOICES: ModulePermission(
        view=True, create=True, edit=True, requires_approval=True
    ),
    Module.REVENUE: VIEW_ONLY,
    Module.DEBT: _OPERATE,
    Module.REPORTS_TRAINING: VIEW_ONLY,
    Module.REPORTS_FINANCE: VIEW_ONLY,
}

_ACCOUNTANT_GRANTS: dict[Module, ModulePermission] = {
    Module.DASHBOARD: VIEW_ONLY,
    Module.CLASSES: VIEW_ONLY,
    Module.SCHEDULE: VIEW_ONLY,
    Module.HOLIDAYS: VIEW_ONLY,
    Module.ENROLLMENT_HISTORY: VIEW_ONLY,
    Module.RESOURCES: VIEW_ONLY,
    Module.STUDENTS: VIEW_ONLY,
    Module.STUDENTS_RESERVED: VIEW_ONLY,
    Module.STUDENTS_DROPPED: VIEW_ONLY,
    Module.PARENTS: VIEW_ONLY,
    Module.STAFF: VIEW_ONLY,
    Module.SALARY_CONFIG: _OPERATE,
    Module.WORK_CONFIRMATION: VIEW_ONLY,
    Module.SALARY_TEACHER: _OPERATE,
    Module.SALARY_STAFF: _OPERATE,
    Module.CONTRACTS: _OPERATE,
    Module.INVOICES: ModulePermission(view=True, create=True, edit=True, delete=True),
    Module.REVENUE: _OPERATE,
    Module.DEBT: _OPERATE,
    Module.REPORTS_FINANCE: _CONTRIBUTE,
}

_MARKETER_GRANTS: dict[Module, ModulePermission] = {
    Module.DASHBOARD: VIEW_ONLY,
    Module.RESOURCES: _CONTRIBUTE,
    Module.STUDENTS: VIEW_ONLY,
    Module.STUDENTS_TRIAL: VIEW_ONLY,
    Module.LEADS: _OPERATE,
    Module.CAMPAIGNS: _OPERATE,
    Module.MARKETING_TASKS: _OPERATE,
    Module.MARKETING_KPI: VIEW_ONLY,
    Module.MARKETING_PLATFORMS: _OPERATE,
    Module.STAFF: VIEW_ONLY,
    Module.SALARY_CONFIG: VIEW_ONLY,
    Module.SALARY_STAFF: VIEW_ONLY,
    Module.DEPARTMENT_GOALS: VIEW_ONLY,
}

# Shared by Vietnamese teachers, foreign teachers and teaching assistants
_TEACHING_GRANTS: dict[Module, ModulePermission] = {
    Module.DASHBOARD: VIEW_ONLY,
    Module.CLASSES: _OWN_VIEW_REDACTED,
    Module.SCHEDULE: _OWN_VIEW,
    Module.ATTENDANCE: _OWN_OPERATE,
    Module.ATTENDANCE_HISTORY: _OWN_VIEW,
    Module.TUTORING: _OWN_OPERATE,
    Module.HOMEWORK: _OWN_OPERATE,
    Module.RESOURCES: _CONTRIBUTE,
    Module.STUDENTS: _OWN_VIEW_REDACTED,
    Module.FEEDBACK: _OWN_CONTRIBUTE,
    Module.STAFF: VIEW_ONLY,
    Module.SALARY_CONFIG: VIEW_ONLY,
    Module.WORK_CONFIRMATION: _CONTRIBUTE,
    Module.SALARY_TEACHER: VIEW_ONLY,
    Module.DEPARTMENT_GOALS: VIEW_ONLY,
    Module.TEACHER_GOALS: VIEW_ONLY,
    Module.REPORTS_TRAINING: _OWN_VIEW,
}

ROLE_GRANTS: Grants = MappingProxyType(
    {
        Role.ADMIN: MappingProxyType(_ADMIN_GRANTS),
        Role.FRONT_OFFICE: MappingProxyType(_FRONT_OFFICE_GRANTS),
        Role.ACCOUNTANT: MappingProxyType(_ACCOUNTANT_GRANTS),
        Role.MARKETER: MappingProxyType(_MARKETER_GRANTS),
        Role.VIETNAMESE_TEACHER: MappingProxyType(_TEACHING_GRANTS),
        Role.FOREIGN_TEACHER: MappingProxyType(_TEACHING_GRANTS),
        Role.TEACHING_ASSISTANT: MappingProxyType(_TEACHING_GRANTS),
    }
)


class PermissionMatrix:
    """Immutable, total mapping of Role -> Module -> ModulePermission.

    The constructor only accepts a table with a record for every role and
    every module in the catalogs. Use ``build_matrix`` to create one from
    a sparse grant table.
    """

    def __init__(self, table: Grants) -> None:
        """Initialize the matrix from a total table.

        Args:
            table: A record for every (role, module) pair.

        Raises:
            MatrixValidationError: If the table is not total over the
                catalogs, contains unknown keys
                or holds a value that is not a ``ModulePermission``.
        """
        violations = _coverage_violations(table)
        if violations:
            raise MatrixValidationError(
                "Permission matrix must define every role and module",
                violations=violations,
            )

        self._table: Mapping[Role, Mapping[Module, ModulePermission]] = (
            MappingProxyType(
                {
                    role: MappingProxyType({m: table[role][m] for m in Module})
                    for role in Role
                }
            )
        )

    def get(self, role: Role, module: Module) -> ModulePermission:
        """Get the record for a (role, module) pair."""
        return self._table[role][module]

    def permissions_for(self, role: Role) -> Mapping[Module, ModulePermission]:
        """Get every module record for a role, in catalog order."""
        return self._table[role]

    def roles(self) -> tuple[Role, ...]:
        """Roles covered by the matrix, in catalog order."""
        return tuple(self._table)

    def violations(self) -> list[str]:
        """List invariant violations.

        The administrator must hold every action on every module.

        Returns:
            Human-readable violations; empty when the matrix is valid.
        """
        problems: list[str] = []
        for module in Module:
            record = self.get(Role.ADMIN, module)
            problems.extend(
                f"{Role.ADMIN.value} lacks {action.value} on {module.value}"
                for action in Action
                if not record.allows(action)
            )
        return problems

    def validate(self) -> None:
        """Check the invariants.

        Raises:
            MatrixValidationError: If any invariant is violated.
        """
        problems = self.violations()
        if problems:
            raise MatrixValidationError(violations=problems)

    def __repr__(self) -> str:
        return f"<PermissionMatrix(roles={len(self._table)}, modules={len(Module)})>"


def _coverage_violations(table: Grants) -> list[str]:
    """Find missing or unknown keys in a candidate table."""
    problems: list[str] = []

    unknown_roles = [key for key in table if not isinstance(key, Role)]
    problems.extend(f"unknown role {key!r}" for key in unknown_roles)

    for role in Role:
        if role not in table:
            problems.append(f"{role.value} has no entry")
            continue
        row = table[role]
        problems.extend(
            f"{role.value} has unknown module {key!r}"
            for key in row
            if not isinstance(key, Module)
        )
        problems.extend(
            f"{role.value} has no record for {module.value}"
            for module in Module
            if module not in row
        )
        problems.extend(
            f"{role.value} has an invalid record for {module.value}"
            for module in Module
            if module in row and not isinstance(row[module], ModulePermission)
        )

    return problems


def build_matrix(grants: Grants, *, validate: bool = True) -> PermissionMatrix:
    """Build a total matrix from a sparse grant table.

    Every role and module missing from ``grants`` receives an explicit
    ``DENY`` record.

    Args:
        grants: Granted records per role; absent pairs are denied.
        validate: Run ``PermissionMatrix.validate`` on the result.

    Returns:
        The total permission matrix.

    Raises:
        MatrixValidationError: If ``grants`` has unknown keys, or
            validation is requested and fails.
    """
    unknown = [f"unknown role {key!r}" for key in grants if not isinstance(key, Role)]
    for role, row in grants.items():
        unknown.extend(
            f"{getattr(role, 'value', role)} has unknown module {key!r}"
            for key in row
            if not isinstance(key, Module)
        )
    if unknown:
        raise MatrixValidationError(
            "Grant table references unknown roles or modules",
            violations=unknown,
        )

    table = {
        role: {module: grants.get(role, {}).get(module, DENY) for module in Module}
        for role in Role
    }
    matrix = PermissionMatrix(table)
    if validate:
        matrix.validate()
    return matrix


DEFAULT_MATRIX = build_matrix(ROLE_GRANTS)
