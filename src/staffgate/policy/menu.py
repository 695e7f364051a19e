"""Menu visibility, derived from the evaluator.

Nothing here stores which modules a role can see. Every answer is
recomputed by filtering the module catalog through ``can_view``, and menu
sections are the catalog's module groups filtered the same way.
"""

from typing import Any

from staffgate.policy.catalog import MenuGroup, Module
from staffgate.policy.evaluator import PolicyEvaluator, default_evaluator
from staffgate.policy.schemas import MenuSection


def visible_modules(
    role: Any, evaluator: PolicyEvaluator | None = None
) -> frozenset[Module]:
    """Modules ``role`` may view."""
    evaluator = evaluator or default_evaluator
    return frozenset(module for module in Module if evaluator.can_view(role, module))


def is_menu_visible(
    role: Any, module: Any, evaluator: PolicyEvaluator | None = None
) -> bool:
    """Whether a module's menu entry is shown to ``role``."""
    evaluator = evaluator or default_evaluator
    return evaluator.can_view(role, module)


def visible_menu(
    role: Any, evaluator: PolicyEvaluator | None = None
) -> list[MenuSection]:
    """Build the navigation menu for a role.

    Sections follow ``MenuGroup`` order and list modules in catalog order.
    Sections without a visible module are left out.

    Args:
        role: The caller's role
        evaluator: Evaluator to consult; defaults to the process-wide one

    Returns:
        The visible menu sections.
    """
    visible = visible_modules(role, evaluator)
    sections: list[MenuSection] = []
    for group in MenuGroup:
        modules = tuple(m for m in Module if m.group is group and m in visible)
        if modules:
            sections.append(MenuSection(group=group, modules=modules))
    return sections


def visible_groups(
    role: Any, evaluator: PolicyEvaluator | None = None
) -> list[MenuGroup]:
    """Menu groups with at least one visible module."""
    return [section.group for section in visible_menu(role, evaluator)]
