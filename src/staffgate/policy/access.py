"""Per-caller access context.

``StaffAccess`` is built once when a caller's identity is established. It
resolves the caller's role, records the security-relevant case of a title
that could not be resolved, and then only forwards questions to the
evaluator with the resolved role filled in.
"""

from typing import Any

import structlog

from staffgate.policy import menu
from staffgate.policy.catalog import (
    Action,
    Module,
    Role,
    is_admin,
    is_office_staff,
    is_teacher,
)
from staffgate.policy.evaluator import PolicyEvaluator, default_evaluator
from staffgate.policy.resolver import AliasTable, resolve_position
from staffgate.policy.schemas import (
    MenuSection,
    ModulePermission,
    RoleResolution,
    StaffRecord,
)


logger = structlog.get_logger()


class StaffAccess:
    """A staff member's resolved role bound to the evaluator."""

    def __init__(
        self,
        staff_id: str | None,
        resolution: RoleResolution,
        evaluator: PolicyEvaluator | None = None,
    ) -> None:
        self.staff_id = staff_id
        self.resolution = resolution
        self.evaluator = evaluator or default_evaluator

    @classmethod
    def for_staff(
        cls,
        record: StaffRecord,
        evaluator: PolicyEvaluator | None = None,
        aliases: AliasTable | None = None,
    ) -> "StaffAccess":
        """Resolve a staff record into an access context.

        A missing or unrecognised position falls back to the
        least-privileged role and is logged as a warning.

        Args:
            record: Identity record from the staff directory
            evaluator: Evaluator to bind; defaults to the process-wide one
            aliases: Alias table; defaults to the process-wide one

        Returns:
            The access context for this staff member.
        """
        resolution = resolve_position(record.position, aliases)

        if not resolution.matched:
            if not record.position:
                logger.warning(
                    "staff_position_missing",
                    staff_id=record.id,
                    fallback_role=resolution.role.value,
                )
            else:
                logger.warning(
                    "unresolved_staff_position",
                    staff_id=record.id,
                    position=record.position,
                    fallback_role=resolution.role.value,
                )

        return cls(record.id, resolution, evaluator)

    @property
    def role(self) -> Role:
        return self.resolution.role

    @property
    def is_admin(self) -> bool:
        return is_admin(self.role)

    @property
    def is_teacher(self) -> bool:
        return is_teacher(self.role)

    @property
    def is_office_staff(self) -> bool:
        return is_office_staff(self.role)

    def has_permission(self, module: Any, action: Any) -> bool:
        return self.evaluator.evaluate(self.role, module, action)

    def permission_for(self, module: Any) -> ModulePermission:
        return self.evaluator.permission_for(self.role, module)

    def can_view(self, module: Any) -> bool:
        return self.has_permission(module, Action.VIEW)

    def can_create(self, module: Any) -> bool:
        return self.has_permission(module, Action.CREATE)

    def can_edit(self, module: Any) -> bool:
        return self.has_permission(module, Action.EDIT)

    def can_delete(self, module: Any) -> bool:
        return self.has_permission(module, Action.DELETE)

    def can_approve(self, module: Any) -> bool:
        return self.has_permission(module, Action.APPROVE)

    def should_restrict_to_own_records(self, module: Any) -> bool:
        return self.evaluator.should_restrict_to_own_records(self.role, module)

    def should_hide_sensitive_field(self, module: Any) -> bool:
        return self.evaluator.should_hide_sensitive_field(self.role, module)

    def requires_approval(self, module: Any) -> bool:
        return self.evaluator.requires_approval(self.role, module)

    def visible_modules(self) -> frozenset[Module]:
        return menu.visible_modules(self.role, self.evaluator)

    def visible_menu(self) -> list[MenuSection]:
        return menu.visible_menu(self.role, self.evaluator)

    def is_menu_visible(self, module: Any) -> bool:
        return menu.is_menu_visible(self.role, module, self.evaluator)

    def __repr__(self) -> str:
        return f"<StaffAccess(staff_id={self.staff_id}, role={self.role.value})>"
