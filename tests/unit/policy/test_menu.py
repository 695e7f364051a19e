"""Unit tests for menu visibility."""

import pytest

from staffgate.policy.catalog import MenuGroup, Module, Role
from staffgate.policy.evaluator import PolicyEvaluator, can_view
from staffgate.policy.matrix import build_matrix
from staffgate.policy.menu import (
    is_menu_visible,
    visible_groups,
    visible_menu,
    visible_modules,
)
from staffgate.policy.schemas import FULL, VIEW_ONLY


pytestmark = pytest.mark.unit

OPERATIONAL_GROUPS = {MenuGroup.TRAINING, MenuGroup.CUSTOMERS}


class TestVisibleModules:
    """Tests for visible_modules."""

    def test_matches_can_view_for_every_role(self) -> None:
        """Verify the menu never diverges from the evaluator."""
        for role in Role:
            expected = {m for m in Module if can_view(role, m)}
            assert visible_modules(role) == expected

    def test_is_menu_visible_matches_can_view(self) -> None:
        for role in Role:
            for module in Module:
                assert is_menu_visible(role, module) is can_view(role, module)

    def test_admin_sees_everything(self) -> None:
        assert visible_modules(Role.ADMIN) == frozenset(Module)

    def test_unknown_role_sees_nothing(self) -> None:
        assert visible_modules("intern") == frozenset()
        assert visible_menu("intern") == []

    def test_privilege_ordering(self) -> None:
        """Verify admin covers front office and teachers.

        Front office covers teachers over the operational modules;
        teachers additionally see their own payroll pages.
        """
        admin = visible_modules(Role.ADMIN)
        front_office = visible_modules(Role.FRONT_OFFICE)
        teacher = visible_modules(Role.VIETNAMESE_TEACHER)

        assert admin >= front_office
        assert admin >= teacher

        operational = {m for m in Module if m.group in OPERATIONAL_GROUPS}
        assert front_office & operational >= teacher & operational

    def test_follows_custom_matrix(self) -> None:
        """Verify visibility is derived from whatever matrix is supplied."""
        evaluator = PolicyEvaluator(
            build_matrix(
                {
                    Role.ADMIN: {m: FULL for m in Module},
                    Role.MARKETER: {Module.SETTINGS: VIEW_ONLY},
                }
            )
        )

        assert visible_modules(Role.MARKETER, evaluator) == {Module.SETTINGS}


class TestVisibleMenu:
    """Tests for the grouped menu."""

    def test_sections_follow_group_order(self) -> None:
        groups = [section.group for section in visible_menu(Role.ADMIN)]
        assert groups == list(MenuGroup)

    def test_sections_only_list_visible_modules(self) -> None:
        for role in Role:
            listed = [m for s in visible_menu(role) for m in s.modules]
            assert len(listed) == len(set(listed))
            assert set(listed) == visible_modules(role)
            for section in visible_menu(role):
                assert all(m.group is section.group for m in section.modules)

    def test_marketer_menu(self) -> None:
        """Verify groups without a visible module are omitted."""
        groups = visible_groups(Role.MARKETER)

        assert MenuGroup.BUSINESS in groups
        assert MenuGroup.FINANCE not in groups
        assert MenuGroup.SETTINGS not in groups

    def test_teacher_training_section(self) -> None:
        sections = {s.group: s.modules for s in visible_menu(Role.TEACHING_ASSISTANT)}

        assert Module.CLASSES in sections[MenuGroup.TRAINING]
        assert Module.HOLIDAYS not in sections[MenuGroup.TRAINING]
        assert MenuGroup.BUSINESS not in sections
