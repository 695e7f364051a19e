"""Job title -> role resolution.

Job titles come from the external staff directory and are untrusted. The
lookup is an exact, case-sensitive match against an alias table; anything
that does not match resolves to the least-privileged role.

Resolution never raises. A configured alias file that cannot be loaded is
reported by ``staffgate.init_policy`` and ``staffgate validate``; on the
request path it is logged and the built-in aliases are used instead.
Callers that hold a staff record are expected to log an unmatched title
(see ``StaffAccess.for_staff``).
"""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from staffgate.config import get_settings
from staffgate.core.errors import AliasConfigError, StaffgateError
from staffgate.policy.catalog import LEAST_PRIVILEGED_ROLE, Role
from staffgate.policy.schemas import AliasFile, RoleResolution


logger = structlog.get_logger()


BUILTIN_ALIASES: Mapping[str, Role] = MappingProxyType(
    {
        # Management
        "Quản lý (Admin)": Role.ADMIN,
        "Quản trị viên": Role.ADMIN,
        "Quản lý": Role.ADMIN,
        "Admin": Role.ADMIN,
        "admin": Role.ADMIN,
        # Consulting, reception and customer care
        "Tư vấn viên": Role.FRONT_OFFICE,
        "Lễ tân": Role.FRONT_OFFICE,
        "Nhân viên": Role.FRONT_OFFICE,
        "CSKH": Role.FRONT_OFFICE,
        "Sale": Role.FRONT_OFFICE,
        "Front-desk": Role.FRONT_OFFICE,
        # Accounting
        "Kế toán": Role.ACCOUNTANT,
        "Accountant": Role.ACCOUNTANT,
        # Marketing
        "Marketing": Role.MARKETER,
        "Marketer": Role.MARKETER,
        "MKT": Role.MARKETER,
        # Vietnamese teachers
        "Giáo Viên Việt": Role.VIETNAMESE_TEACHER,
        "Giáo viên Việt": Role.VIETNAMESE_TEACHER,
        "GV Việt": Role.VIETNAMESE_TEACHER,
        "Giáo viên": Role.VIETNAMESE_TEACHER,
        # Foreign teachers
        "Giáo Viên Nước Ngoài": Role.FOREIGN_TEACHER,
        "Giáo viên nước ngoài": Role.FOREIGN_TEACHER,
        "GV Ngoại": Role.FOREIGN_TEACHER,
        "GVNN": Role.FOREIGN_TEACHER,
        # Teaching assistants
        "Trợ Giảng": Role.TEACHING_ASSISTANT,
        "Trợ giảng": Role.TEACHING_ASSISTANT,
        "TG": Role.TEACHING_ASSISTANT,
    }
)


class AliasTable:
    """Read-only exact-match lookup from job title to role."""

    def __init__(self, aliases: Mapping[str, Role] | None = None) -> None:
        """Initialize the table.

        Args:
            aliases: Title -> role mapping; defaults to the built-in aliases.
        """
        self._aliases: Mapping[str, Role] = MappingProxyType(
            dict(BUILTIN_ALIASES if aliases is None else aliases)
        )

    @classmethod
    def load(cls, path: Path) -> "AliasTable":
        """Build a table from the built-in aliases plus an alias file.

        The file may add titles, and may repeat a built-in title with the
        same role, but may not move a built-in title to another role.

        Args:
            path: YAML file with an ``aliases`` mapping.

        Returns:
            The merged alias table.

        Raises:
            AliasConfigError: If the file is missing, unparsable, fails
                schema validation or conflicts with a built-in alias.
        """
        if not path.exists():
            raise AliasConfigError("Alias file not found", path=str(path))

        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise AliasConfigError(f"Alias file is not valid YAML: {e}", path=str(path)) from e

        try:
            alias_file = AliasFile.model_validate(data)
        except ValidationError as e:
            raise AliasConfigError(
                "Alias file does not match the expected schema",
                path=str(path),
                details={"errors": e.errors(include_url=False)},
            ) from e

        conflicts = sorted(
            title
            for title, role in alias_file.aliases.items()
            if title in BUILTIN_ALIASES and BUILTIN_ALIASES[title] is not role
        )
        if conflicts:
            raise AliasConfigError(
                "Alias file re-maps built-in titles to a different role",
                path=str(path),
                details={"conflicts": conflicts},
            )

        merged = {**BUILTIN_ALIASES, **alias_file.aliases}
        logger.info(
            "alias_file_loaded",
            path=str(path),
            added=len(merged) - len(BUILTIN_ALIASES),
        )
        return cls(merged)

    def lookup(self, position: Any) -> Role | None:
        """Return the role for an exact title match, or None."""
        if not isinstance(position, str) or not position:
            return None
        return self._aliases.get(position)

    def titles(self) -> list[str]:
        """All known titles, sorted."""
        return sorted(self._aliases)

    def __contains__(self, position: object) -> bool:
        return isinstance(position, str) and position in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)


@lru_cache
def get_alias_table() -> AliasTable:
    """Get the cached process-wide alias table.

    Raises:
        AliasConfigError: If the configured alias file cannot be loaded.
    """
    aliases_file = get_settings().aliases_file
    if aliases_file is None:
        return AliasTable()
    return AliasTable.load(aliases_file)


def _default_table() -> AliasTable:
    """The process-wide table, or the built-in aliases if it cannot load."""
    try:
        return get_alias_table()
    except (StaffgateError, ValidationError) as e:
        logger.warning("alias_table_unavailable", error=str(e))
        return AliasTable()


def resolve_position(position: Any, table: AliasTable | None = None) -> RoleResolution:
    """Resolve a job title, reporting whether an alias matched.

    Empty, missing, non-string and unknown titles all resolve to the
    least-privileged role with ``matched=False``. This never raises.

    Args:
        position: Job title from the staff directory.
        table: Alias table; defaults to the process-wide table.

    Returns:
        The resolution result.
    """
    if table is None:
        table = _default_table()
    role = table.lookup(position)
    return RoleResolution(
        position=position if isinstance(position, str) else None,
        role=role if role is not None else LEAST_PRIVILEGED_ROLE,
        matched=role is not None,
    )


def resolve_role(position: Any, table: AliasTable | None = None) -> Role:
    """Resolve a job title to a role (least privilege when unknown)."""
    return resolve_position(position, table).role
