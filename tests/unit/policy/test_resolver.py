"""Unit tests for job title resolution and the alias table."""

from collections.abc import Callable
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from staffgate.core.errors import AliasConfigError
from staffgate.policy.catalog import LEAST_PRIVILEGED_ROLE, Role
from staffgate.policy.resolver import (
    BUILTIN_ALIASES,
    AliasTable,
    get_alias_table,
    resolve_position,
    resolve_role,
)


pytestmark = pytest.mark.unit


class TestResolveRole:
    """Tests for resolve_role."""

    @pytest.mark.parametrize(
        ("position", "expected"),
        [
            ("Quản lý (Admin)", Role.ADMIN),
            ("Admin", Role.ADMIN),
            ("Tư vấn viên", Role.FRONT_OFFICE),
            ("Lễ tân", Role.FRONT_OFFICE),
            ("Front-desk", Role.FRONT_OFFICE),
            ("Kế toán", Role.ACCOUNTANT),
            ("MKT", Role.MARKETER),
            ("Giáo Viên Việt", Role.VIETNAMESE_TEACHER),
            ("Giáo Viên Nước Ngoài", Role.FOREIGN_TEACHER),
            ("GVNN", Role.FOREIGN_TEACHER),
            ("Trợ Giảng", Role.TEACHING_ASSISTANT),
        ],
    )
    def test_known_titles(self, position: str, expected: Role) -> None:
        assert resolve_role(position) is expected

    @pytest.mark.parametrize(
        "position",
        [
            "Some Unknown Title",
            "",
            None,
            42,
            "ADMIN",
            " Admin",
            "Admin ",
            "Quản lý (admin)",
            "Administrator of everything",
        ],
    )
    def test_unmatched_titles_fall_back_to_least_privilege(self, position) -> None:
        """Verify no fuzzy matching and no broad default."""
        role = resolve_role(position)
        assert role is LEAST_PRIVILEGED_ROLE
        assert role is not Role.ADMIN

    def test_unknown_title_resolves_to_teaching_assistant(self) -> None:
        assert resolve_role("Some Unknown Title") is Role.TEACHING_ASSISTANT

    def test_resolution_is_silent(self) -> None:
        """Verify the resolver itself does not log."""
        with capture_logs() as logs:
            resolve_role("Some Unknown Title")
        assert logs == []


class TestResolvePosition:
    """Tests for resolve_position."""

    def test_reports_match(self) -> None:
        result = resolve_position("Kế toán")
        assert result.matched is True
        assert result.role is Role.ACCOUNTANT
        assert result.position == "Kế toán"

    def test_reports_miss(self) -> None:
        result = resolve_position("Janitor")
        assert result.matched is False
        assert result.role is LEAST_PRIVILEGED_ROLE

    def test_non_string_position_is_dropped(self) -> None:
        result = resolve_position(123)
        assert result.position is None
        assert result.matched is False

    def test_explicit_table(self) -> None:
        """Verify an explicit table is used instead of the global one."""
        table = AliasTable({"Head Teacher": Role.VIETNAMESE_TEACHER})
        assert resolve_role("Head Teacher", table) is Role.VIETNAMESE_TEACHER
        assert resolve_role("Admin", table) is LEAST_PRIVILEGED_ROLE

    def test_empty_table_denies_everyone(self) -> None:
        assert resolve_role("Admin", AliasTable({})) is LEAST_PRIVILEGED_ROLE


class TestAliasTable:
    """Tests for AliasTable and alias files."""

    def test_defaults_to_builtin_aliases(self) -> None:
        table = AliasTable()
        assert len(table) == len(BUILTIN_ALIASES)
        assert "Lễ tân" in table
        assert None not in table

    def test_load_adds_titles(self, write_alias_file: Callable[[str], Path]) -> None:
        path = write_alias_file(
            'aliases:\n  "Head of Accounts": accountant\n  "Receptionist": front_office\n'
        )

        with capture_logs() as logs:
            table = AliasTable.load(path)

        assert table.lookup("Head of Accounts") is Role.ACCOUNTANT
        assert table.lookup("Receptionist") is Role.FRONT_OFFICE
        assert table.lookup("Kế toán") is Role.ACCOUNTANT
        assert len(table) == len(BUILTIN_ALIASES) + 2
        assert logs[0]["event"] == "alias_file_loaded"
        assert logs[0]["added"] == 2

    def test_load_allows_repeating_builtin_with_same_role(
        self, write_alias_file: Callable[[str], Path]
    ) -> None:
        path = write_alias_file("aliases:\n  Admin: admin\n")
        assert AliasTable.load(path).lookup("Admin") is Role.ADMIN

    def test_load_rejects_remapping_builtin(
        self, write_alias_file: Callable[[str], Path]
    ) -> None:
        """Verify an alias file cannot move an existing title."""
        path = write_alias_file("aliases:\n  Trợ giảng: admin\n")

        with pytest.raises(AliasConfigError) as exc_info:
            AliasTable.load(path)

        assert exc_info.value.details["conflicts"] == ["Trợ giảng"]

    def test_load_rejects_unknown_role(
        self, write_alias_file: Callable[[str], Path]
    ) -> None:
        path = write_alias_file("aliases:\n  Owner: superuser\n")

        with pytest.raises(AliasConfigError, match="schema"):
            AliasTable.load(path)

    def test_load_rejects_bad_yaml(self, write_alias_file: Callable[[str], Path]) -> None:
        path = write_alias_file("aliases: [unclosed\n")

        with pytest.raises(AliasConfigError, match="not valid YAML"):
            AliasTable.load(path)

    def test_load_rejects_missing_file(self, temp_dir: Path) -> None:
        missing = temp_dir / "missing.yaml"

        with pytest.raises(AliasConfigError, match="not found") as exc_info:
            AliasTable.load(missing)

        assert exc_info.value.details["path"] == str(missing)
        assert exc_info.value.error_code == "alias_config_invalid"

    def test_empty_file_adds_nothing(self, write_alias_file: Callable[[str], Path]) -> None:
        path = write_alias_file("")
        assert len(AliasTable.load(path)) == len(BUILTIN_ALIASES)


class TestGetAliasTable:
    """Tests for the process-wide alias table."""

    def test_without_alias_file(self) -> None:
        assert len(get_alias_table()) == len(BUILTIN_ALIASES)

    def test_is_cached(self) -> None:
        assert get_alias_table() is get_alias_table()

    def test_reads_configured_file(
        self,
        write_alias_file: Callable[[str], Path],
        use_alias_file: Callable[[Path], None],
    ) -> None:
        use_alias_file(write_alias_file('aliases:\n  "Head Teacher": vietnamese_teacher\n'))

        assert resolve_role("Head Teacher") is Role.VIETNAMESE_TEACHER

    def test_broken_configured_file_raises(
        self,
        temp_dir: Path,
        use_alias_file: Callable[[Path], None],
    ) -> None:
        use_alias_file(temp_dir / "missing.yaml")

        with pytest.raises(AliasConfigError):
            get_alias_table()


class TestResolutionWithBrokenConfiguration:
    """Tests that resolution degrades instead of raising."""

    def test_missing_alias_file_uses_builtin_aliases(
        self,
        temp_dir: Path,
        use_alias_file: Callable[[Path], None],
    ) -> None:
        use_alias_file(temp_dir / "gone.yaml")

        with capture_logs() as logs:
            unknown = resolve_role("Some Unknown Title")
            known = resolve_role("Lễ tân")

        assert unknown is LEAST_PRIVILEGED_ROLE
        assert known is Role.FRONT_OFFICE
        assert logs[0]["event"] == "alias_table_unavailable"
        assert logs[0]["log_level"] == "warning"

    def test_conflicting_alias_file_uses_builtin_aliases(
        self,
        write_alias_file: Callable[[str], Path],
        use_alias_file: Callable[[Path], None],
    ) -> None:
        use_alias_file(write_alias_file("aliases:\n  Trợ giảng: admin\n"))

        assert resolve_role("Trợ giảng") is Role.TEACHING_ASSISTANT

    def test_invalid_log_level_still_resolves(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Verify a settings error does not reach the caller."""
        monkeypatch.setenv("STAFFGATE_LOG_LEVEL", "verbose")

        with capture_logs() as logs:
            result = resolve_position("Admin")

        assert result.role is Role.ADMIN
        assert result.matched is True
        assert [entry["event"] for entry in logs] == ["alias_table_unavailable"]
