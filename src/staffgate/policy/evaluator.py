"""Permission evaluation.

Every question the engine answers goes through ``PolicyEvaluator.evaluate``
(actions) or ``PolicyEvaluator.has_directive`` (condition flags). Both are
pure lookups against an immutable matrix: no clock, no I/O, no state, and
no exceptions. Anything that is not a known role, module or action yields
``False``.
"""

from typing import Any

from staffgate.policy.catalog import (
    Action,
    Directive,
    coerce_action,
    coerce_module,
    coerce_role,
)
from staffgate.policy.matrix import DEFAULT_MATRIX, PermissionMatrix
from staffgate.policy.schemas import DENY, ModulePermission


class PolicyEvaluator:
    """Answers permission and directive queries against a matrix."""

    def __init__(self, matrix: PermissionMatrix = DEFAULT_MATRIX) -> None:
        self.matrix = matrix

    def permission_for(self, role: Any, module: Any) -> ModulePermission:
        """Get the record for a (role, module) pair.

        Returns:
            The stored record, or ``DENY`` for an unknown role or module.
        """
        known_role = coerce_role(role)
        known_module = coerce_module(module)
        if known_role is None or known_module is None:
            return DENY
        return self.matrix.get(known_role, known_module)

    def evaluate(self, role: Any, module: Any, action: Any) -> bool:
        """Check whether ``role`` may perform ``action`` on ``module``.

        Args:
            role: A Role (or its value)
            module: A Module (or its value)
            action: An Action (or its value)

        Returns:
            The stored grant; False for anything unknown.
        """
        known_action = coerce_action(action)
        if known_action is None:
            return False
        return self.permission_for(role, module).allows(known_action)

    def can_view(self, role: Any, module: Any) -> bool:
        return self.evaluate(role, module, Action.VIEW)

    def can_create(self, role: Any, module: Any) -> bool:
        return self.evaluate(role, module, Action.CREATE)

    def can_edit(self, role: Any, module: Any) -> bool:
        return self.evaluate(role, module, Action.EDIT)

    def can_delete(self, role: Any, module: Any) -> bool:
        return self.evaluate(role, module, Action.DELETE)

    def can_approve(self, role: Any, module: Any) -> bool:
        return self.evaluate(role, module, Action.APPROVE)

    def has_directive(self, role: Any, module: Any, directive: Directive) -> bool:
        """Check a condition flag; False when the pair or flag is absent."""
        return self.permission_for(role, module).has_directive(directive)

    def should_restrict_to_own_records(self, role: Any, module: Any) -> bool:
        """Data access must be filtered to the caller's own records."""
        return self.has_directive(role, module, Directive.ONLY_OWN_RECORDS)

    def should_hide_sensitive_field(self, role: Any, module: Any) -> bool:
        """Sensitive contact fields must be redacted before display."""
        return self.has_directive(role, module, Directive.HIDE_SENSITIVE_FIELD)

    def requires_approval(self, role: Any, module: Any) -> bool:
        """Destructive actions must be routed to a second approver.

        This is a workflow signal only; it never changes ``evaluate``.
        """
        return self.has_directive(role, module, Directive.REQUIRES_APPROVAL)

    def active_directives(self, role: Any, module: Any) -> frozenset[Directive]:
        """All condition flags set for a (role, module) pair."""
        return frozenset(
            d for d in Directive if self.has_directive(role, module, d)
        )


default_evaluator = PolicyEvaluator(DEFAULT_MATRIX)


def permission_for(role: Any, module: Any) -> ModulePermission:
    return default_evaluator.permission_for(role, module)


def evaluate(role: Any, module: Any, action: Any) -> bool:
    return default_evaluator.evaluate(role, module, action)


def can_view(role: Any, module: Any) -> bool:
    return default_evaluator.can_view(role, module)


def can_create(role: Any, module: Any) -> bool:
    return default_evaluator.can_create(role, module)


def can_edit(role: Any, module: Any) -> bool:
    return default_evaluator.can_edit(role, module)


def can_delete(role: Any, module: Any) -> bool:
    return default_evaluator.can_delete(role, module)


def can_approve(role: Any, module: Any) -> bool:
    return default_evaluator.can_approve(role, module)


def should_restrict_to_own_records(role: Any, module: Any) -> bool:
    return default_evaluator.should_restrict_to_own_records(role, module)


def should_hide_sensitive_field(role: Any, module: Any) -> bool:
    return default_evaluator.should_hide_sensitive_field(role, module)


def requires_approval(role: Any, module: Any) -> bool:
    return default_evaluator.requires_approval(role, module)


def active_directives(role: Any, module: Any) -> frozenset[Directive]:
    return default_evaluator.active_directives(role, module)
