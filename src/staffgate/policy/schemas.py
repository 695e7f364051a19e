"""Pydantic schemas for the policy engine."""

from pydantic import BaseModel, ConfigDict, Field

from staffgate.policy.catalog import Action, Directive, MenuGroup, Module, Role


class ModulePermission(BaseModel):
    """Grants and conditions for one (role, module) pair.

    Every field defaults to False, so a record only states what it grants.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    view: bool = Field(False, description="May open the module")
    create: bool = Field(False, description="May create records")
    edit: bool = Field(False, description="May edit records")
    delete: bool = Field(False, description="May delete records")
    approve: bool = Field(False, description="May approve pending records")

    only_own_records: bool = Field(
        False, description="Restrict data to the caller's own records"
    )
    hide_sensitive_field: bool = Field(
        False, description="Redact sensitive contact fields"
    )
    requires_approval: bool = Field(
        False, description="Route destructive actions through a second approver"
    )

    def allows(self, action: Action) -> bool:
        """Return the stored grant for ``action``."""
        return bool(getattr(self, action.value))

    def has_directive(self, directive: Directive) -> bool:
        """Return the stored condition flag for ``directive``."""
        return bool(getattr(self, directive.value))

    @property
    def actions(self) -> frozenset[Action]:
        """Actions granted by this record."""
        return frozenset(action for action in Action if self.allows(action))

    @property
    def directives(self) -> frozenset[Directive]:
        """Condition flags set on this record."""
        return frozenset(d for d in Directive if self.has_directive(d))


DENY = ModulePermission()
VIEW_ONLY = ModulePermission(view=True)
FULL = ModulePermission(view=True, create=True, edit=True, delete=True, approve=True)


class StaffRecord(BaseModel):
    """Caller identity as supplied by the staff directory."""

    id: str = Field(..., description="Staff member identifier")
    position: str | None = Field(None, description="Free-text job title")


class RoleResolution(BaseModel):
    """Outcome of resolving a job title to a role."""

    model_config = ConfigDict(frozen=True)

    position: str | None = Field(None, description="Job title as received")
    role: Role = Field(..., description="Resolved role")
    matched: bool = Field(..., description="Whether an alias matched exactly")


class MenuSection(BaseModel):
    """One visible section of the navigation menu."""

    model_config = ConfigDict(frozen=True)

    group: MenuGroup
    modules: tuple[Module, ...] = Field(default_factory=tuple)


class AliasFile(BaseModel):
    """Operator alias file (YAML)."""

    model_config = ConfigDict(extra="forbid")

    aliases: dict[str, Role] = Field(
        default_factory=dict,
        description="Exact job title -> role value",
    )
