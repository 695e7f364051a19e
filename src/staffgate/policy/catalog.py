"""Closed catalogs for the policy engine.

Roles, modules, actions, directives and menu groups are closed
enumerations. Values are the lowercase keys used in configuration files
and on the command line.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any


class Role(str, Enum):
    """Canonical staff roles.

    Office roles:
        ADMIN, FRONT_OFFICE, ACCOUNTANT, MARKETER

    Training roles:
        VIETNAMESE_TEACHER, FOREIGN_TEACHER, TEACHING_ASSISTANT
    """

    ADMIN = "admin"
    FRONT_OFFICE = "front_office"  # consulting and customer care
    ACCOUNTANT = "accountant"
    MARKETER = "marketer"
    VIETNAMESE_TEACHER = "vietnamese_teacher"
    FOREIGN_TEACHER = "foreign_teacher"
    TEACHING_ASSISTANT = "teaching_assistant"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings."""
        return [role.value for role in cls]


class Module(str, Enum):
    """Protected areas of the portal."""

    DASHBOARD = "dashboard"

    # Training
    CLASSES = "classes"
    SCHEDULE = "schedule"
    HOLIDAYS = "holidays"
    ATTENDANCE = "attendance"
    ATTENDANCE_HISTORY = "attendance_history"
    ENROLLMENT_HISTORY = "enrollment_history"
    TUTORING = "tutoring"
    HOMEWORK = "homework"
    RESOURCES = "resources"

    # Customers
    STUDENTS = "students"
    STUDENTS_RESERVED = "students_reserved"
    STUDENTS_DROPPED = "students_dropped"
    STUDENTS_TRIAL = "students_trial"
    PARENTS = "parents"
    FEEDBACK = "feedback"
    SERVICE_DASHBOARD = "service_dashboard"

    # Business
    LEADS = "leads"
    CAMPAIGNS = "campaigns"
    MARKETING_TASKS = "marketing_tasks"
    MARKETING_KPI = "marketing_kpi"
    MARKETING_PLATFORMS = "marketing_platforms"

    # HR and payroll
    STAFF = "staff"
    SALARY_CONFIG = "salary_config"
    WORK_CONFIRMATION = "work_confirmation"
    SALARY_TEACHER = "salary_teacher"
    SALARY_STAFF = "salary_staff"
    DEPARTMENT_GOALS = "department_goals"
    TEACHER_GOALS = "teacher_goals"

    # Finance
    CONTRACTS = "contracts"
    INVOICES = "invoices"
    REVENUE = "revenue"
    DEBT = "debt"

    # Reports
    REPORTS_TRAINING = "reports_training"
    REPORTS_FINANCE = "reports_finance"

    SETTINGS = "settings"

    @property
    def group(self) -> "MenuGroup":
        """Menu group this module is listed under."""
        return MODULE_GROUPS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all module values as strings."""
        return [module.value for module in cls]


class Action(str, Enum):
    """Actions that can be requested on a module."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    APPROVE = "approve"


class Directive(str, Enum):
    """Conditions attached to a grant that an outer layer must enforce.

    ONLY_OWN_RECORDS:
        Data access must be filtered to the caller's own records
        (for teachers: the classes they teach).
    HIDE_SENSITIVE_FIELD:
        Sensitive contact data (parent phone numbers) must be redacted.
    REQUIRES_APPROVAL:
        Destructive actions go through a second approver instead of
        running immediately. Does not change what ``evaluate`` returns.
    """

    ONLY_OWN_RECORDS = "only_own_records"
    HIDE_SENSITIVE_FIELD = "hide_sensitive_field"
    REQUIRES_APPROVAL = "requires_approval"


class MenuGroup(str, Enum):
    """Sections of the navigation menu, in display order."""

    OVERVIEW = "overview"
    TRAINING = "training"
    CUSTOMERS = "customers"
    BUSINESS = "business"
    HR = "hr"
    FINANCE = "finance"
    REPORTS = "reports"
    SETTINGS = "settings"


MODULE_GROUPS: MappingProxyType[Module, MenuGroup] = MappingProxyType(
    {
        Module.DASHBOARD: MenuGroup.OVERVIEW,
        Module.CLASSES: MenuGroup.TRAINING,
        Module.SCHEDULE: MenuGroup.TRAINING,
        Module.HOLIDAYS: MenuGroup.TRAINING,
        Module.ATTENDANCE: MenuGroup.TRAINING,
        Module.ATTENDANCE_HISTORY: MenuGroup.TRAINING,
        Module.ENROLLMENT_HISTORY: MenuGroup.TRAINING,
        Module.TUTORING: MenuGroup.TRAINING,
        Module.HOMEWORK: MenuGroup.TRAINING,
        Module.RESOURCES: MenuGroup.TRAINING,
        Module.STUDENTS: MenuGroup.CUSTOMERS,
        Module.STUDENTS_RESERVED: MenuGroup.CUSTOMERS,
        Module.STUDENTS_DROPPED: MenuGroup.CUSTOMERS,
        Module.STUDENTS_TRIAL: MenuGroup.CUSTOMERS,
        Module.PARENTS: MenuGroup.CUSTOMERS,
        Module.FEEDBACK: MenuGroup.CUSTOMERS,
        Module.SERVICE_DASHBOARD: MenuGroup.CUSTOMERS,
        Module.LEADS: MenuGroup.BUSINESS,
        Module.CAMPAIGNS: MenuGroup.BUSINESS,
        Module.MARKETING_TASKS: MenuGroup.BUSINESS,
        Module.MARKETING_KPI: MenuGroup.BUSINESS,
        Module.MARKETING_PLATFORMS: MenuGroup.BUSINESS,
        Module.STAFF: MenuGroup.HR,
        Module.SALARY_CONFIG: MenuGroup.HR,
        Module.WORK_CONFIRMATION: MenuGroup.HR,
        Module.SALARY_TEACHER: MenuGroup.HR,
        Module.SALARY_STAFF: MenuGroup.HR,
        Module.DEPARTMENT_GOALS: MenuGroup.HR,
        Module.TEACHER_GOALS: MenuGroup.HR,
        Module.CONTRACTS: MenuGroup.FINANCE,
        Module.INVOICES: MenuGroup.FINANCE,
        Module.REVENUE: MenuGroup.FINANCE,
        Module.DEBT: MenuGroup.FINANCE,
        Module.REPORTS_TRAINING: MenuGroup.REPORTS,
        Module.REPORTS_FINANCE: MenuGroup.REPORTS,
        Module.SETTINGS: MenuGroup.SETTINGS,
    }
)

LEAST_PRIVILEGED_ROLE = Role.TEACHING_ASSISTANT

TEACHING_ROLES: frozenset[Role] = frozenset(
    {Role.VIETNAMESE_TEACHER, Role.FOREIGN_TEACHER, Role.TEACHING_ASSISTANT}
)
OFFICE_ROLES: frozenset[Role] = frozenset({Role.FRONT_OFFICE, Role.ACCOUNTANT})


def coerce_role(value: Any) -> Role | None:
    """Return ``value`` as a Role, or None if it is not one."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except (TypeError, ValueError):
        return None


def coerce_module(value: Any) -> Module | None:
    """Return ``value`` as a Module, or None if it is not one."""
    if isinstance(value, Module):
        return value
    try:
        return Module(value)
    except (TypeError, ValueError):
        return None


def coerce_action(value: Any) -> Action | None:
    """Return ``value`` as an Action, or None if it is not one."""
    if isinstance(value, Action):
        return value
    try:
        return Action(value)
    except (TypeError, ValueError):
        return None


def is_admin(role: Any) -> bool:
    """Check if ``role`` is the administrator role."""
    return coerce_role(role) is Role.ADMIN


def is_teacher(role: Any) -> bool:
    """Check if ``role`` belongs to the training staff."""
    return coerce_role(role) in TEACHING_ROLES


def is_office_staff(role: Any) -> bool:
    """Check if ``role`` is front office or accounting."""
    return coerce_role(role) in OFFICE_ROLES
