"""
Axis models — the closed enumerations the generator crosses.

A generation run is fully described by a ``GeneratorConfig``: four
axes (attributes, base types, value kinds, call shapes) plus the
naming context the emitted C# lives in.  Every axis is static
configuration, validated once at load time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_QUALIFIED = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


def _check_identifier(value: str) -> str:
    if not _IDENTIFIER.match(value):
        raise ValueError(f"'{value}' is not a valid C# identifier")
    return value


Identifier = Annotated[str, AfterValidator(_check_identifier)]


class GuardFamily(str, Enum):
    """Ambient condition a guard keys off.

    The two families are mutually exclusive: an attribute gates on
    either the server being active or the client being connected.
    """

    SERVER = "server"
    CLIENT = "client"


class CallShape(str, Enum):
    """How a generated member hands back its value.

    Declaration order is the emission order: direct return first.
    """

    RETURN = "return"
    OUT = "out"


class AttributeKind(BaseModel):
    """A guard attribute, e.g. ``[Server]`` or ``[ClientCallback]``.

    Attributes:
        name:   Attribute name as written in C# (without brackets).
        family: Which ambient condition the guard checks.
        silent: Callback-style guard, skips the call without logging.
    """

    name: Identifier
    family: GuardFamily
    silent: bool = False


class BaseType(BaseModel):
    """Host base type the generated members are attached to."""

    name: Identifier
    component: bool = True      # created via GameObject.AddComponent<T>()
    host_name: Identifier | None = None

    @property
    def host_type_name(self) -> str:
        """Name of the generated host type deriving from this base type."""
        return self.host_name or f"AttributeBehaviour_{self.name}"

    @property
    def fixture_type_name(self) -> str:
        return f"AttributeTest_{self.name}"


class ValueKind(BaseModel):
    """One value domain under test.

    Attributes:
        name:           C# type spelling, also used in member names.
        literal:        Side-effect-free expression for the expected value.
        qualified_name: Full type name as the runtime reports it in
                        diagnostics (``System.Int32``, not ``int``).
        declaration:    Optional auxiliary type body emitted into the
                        support namespace (reference kinds only).
    """

    name: Identifier
    literal: str
    qualified_name: str
    declaration: str = ""

    @field_validator("literal")
    @classmethod
    def _literal_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("literal must not be empty")
        return value

    @field_validator("qualified_name")
    @classmethod
    def _qualified_name_shape(cls, value: str) -> str:
        if not _QUALIFIED.match(value):
            raise ValueError(f"'{value}' is not a qualified type name")
        return value


@dataclass(frozen=True)
class CellKey:
    """One point of the cross-product."""

    attribute: AttributeKind
    base_type: BaseType
    value_kind: ValueKind
    shape: CallShape


class GeneratorConfig(BaseModel):
    """Everything a generation run needs — loaded from guardgen.yml.

    Defaults reproduce the stock attribute suite; a config file only
    has to name the keys it overrides.
    """

    namespace: str = "Mirror.Tests.Generated.Attributes"
    support_namespace: str = "Mirror.Tests.Generators"
    usings: list[str] = Field(
        default_factory=lambda: [
            "Mirror",
            "NUnit.Framework",
            "UnityEngine",
            "UnityEngine.TestTools",
        ]
    )
    artifact: Identifier = "AttributeTest"
    output_dir: str = "Assets/Mirror/Tests/Generated"

    attributes: list[AttributeKind] = Field(default_factory=list)
    base_types: list[BaseType] = Field(default_factory=list)
    value_kinds: list[ValueKind] = Field(default_factory=list)
    shapes: list[CallShape] = Field(default_factory=lambda: list(CallShape))

    @field_validator("namespace", "support_namespace")
    @classmethod
    def _namespace_shape(cls, value: str) -> str:
        if not _QUALIFIED.match(value):
            raise ValueError(f"'{value}' is not a valid namespace")
        return value

    @model_validator(mode="after")
    def _axes_are_closed_sets(self) -> GeneratorConfig:
        axes = {
            "attributes": [a.name for a in self.attributes],
            "base_types": [b.name for b in self.base_types],
            "value_kinds": [v.name for v in self.value_kinds],
            "shapes": [s.value for s in self.shapes],
        }
        for axis, names in axes.items():
            if not names:
                raise ValueError(f"axis '{axis}' must not be empty")
            dupes = sorted({n for n in names if names.count(n) > 1})
            if dupes:
                raise ValueError(f"duplicate entries in '{axis}': {', '.join(dupes)}")

        literals = [v.literal for v in self.value_kinds]
        dupes = sorted({lit for lit in literals if literals.count(lit) > 1})
        if dupes:
            raise ValueError(f"value kinds share literals: {', '.join(dupes)}")

        for kind in self.value_kinds:
            if not kind.declaration:
                continue
            expected = f"{self.support_namespace}.{kind.name}"
            if kind.qualified_name != expected:
                raise ValueError(
                    f"value kind '{kind.name}' declares its type in "
                    f"{self.support_namespace}, so its qualified_name must be "
                    f"'{expected}' (got '{kind.qualified_name}')"
                )

        self._check_type_names()
        self._check_member_names()
        return self

    def _check_type_names(self) -> None:
        """Hosts, fixtures and support types share one C# type namespace."""
        hosts = [b.host_type_name for b in self.base_types]
        dupes = sorted({h for h in hosts if hosts.count(h) > 1})
        if dupes:
            raise ValueError(f"host type names collide: {', '.join(dupes)}")

        taken = {b.fixture_type_name: "fixture" for b in self.base_types}
        taken.update({v.name: "support type" for v in self.value_kinds if v.declaration})
        for host in hosts:
            if host in taken:
                raise ValueError(f"host type name '{host}' collides with a {taken[host]}")

    def _check_member_names(self) -> None:
        """Generated member and test names must be unique within a host."""
        from guardgen.core.services.generators.signatures import callable_name, case_name

        for naming in (callable_name, case_name):
            names = [
                naming(a, v, s)
                for a in self.attributes
                for v in self.value_kinds
                for s in self.shapes
            ]
            dupes = sorted({n for n in names if names.count(n) > 1})
            if dupes:
                raise ValueError(f"generated member names collide: {', '.join(dupes)}")

    def ordered_shapes(self) -> list[CallShape]:
        """Configured shapes in emission order (direct return first)."""
        return [shape for shape in CallShape if shape in self.shapes]
