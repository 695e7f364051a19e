"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog

from staffgate.config import get_settings
from staffgate.policy.catalog import Role
from staffgate.policy.resolver import get_alias_table
from staffgate.policy.schemas import StaffRecord


@pytest.fixture(autouse=True)
def reset_process_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Give each test fresh settings, alias table and logging config."""
    monkeypatch.delenv("STAFFGATE_ALIASES_FILE", raising=False)
    monkeypatch.delenv("STAFFGATE_ENVIRONMENT", raising=False)
    monkeypatch.delenv("STAFFGATE_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    get_alias_table.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    get_alias_table.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test operations.

    Yields:
        Path to the temporary directory
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def write_alias_file(temp_dir: Path) -> Callable[[str], Path]:
    """Return a helper that writes YAML text to an alias file."""

    def _write(content: str) -> Path:
        path = temp_dir / "aliases.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def use_alias_file(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[Path], None]:
    """Return a helper that points the settings at an alias file."""

    def _use(path: Path) -> None:
        monkeypatch.setenv("STAFFGATE_ALIASES_FILE", str(path))
        get_settings.cache_clear()
        get_alias_table.cache_clear()

    return _use


@pytest.fixture
def front_office_staff() -> StaffRecord:
    """Receptionist record from the staff directory."""
    return StaffRecord(id="staff-001", position="Lễ tân")


@pytest.fixture
def teacher_staff() -> StaffRecord:
    """Vietnamese teacher record from the staff directory."""
    return StaffRecord(id="staff-002", position="Giáo viên Việt")


@pytest.fixture
def all_roles() -> list[Role]:
    return list(Role)
