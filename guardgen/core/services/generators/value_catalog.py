"""
Value catalog — expected literal and runtime type name per value kind.

The qualified names here are what the guard runtime prints in its
warnings (CLR full names), so they must move in lockstep with that
runtime.  Nothing in the generator can check this; the generated
suite itself is the cross-check.
"""

from __future__ import annotations

from collections.abc import Iterable

from guardgen.core.models.axes import ValueKind


class UnknownValueKindError(KeyError):
    """Raised when a value kind outside the catalog is requested."""


_SUPPORT_NAMESPACE = "Mirror.Tests.Generators"

_CLASS_WITH_NO_CONSTRUCTOR = """\
public class ClassWithNoConstructor
{
    public int a;
}"""

_CLASS_WITH_CONSTRUCTOR = """\
public class ClassWithConstructor
{
    public int a;

    public ClassWithConstructor(int a)
    {
        this.a = a;
    }
}"""


# ── Stock value kinds ───────────────────────────────────────────

DEFAULT_VALUE_KINDS: tuple[ValueKind, ...] = (
    ValueKind(name="float", literal="2020f", qualified_name="System.Single"),
    ValueKind(name="double", literal="2.54", qualified_name="System.Double"),
    ValueKind(name="bool", literal="true", qualified_name="System.Boolean"),
    ValueKind(name="char", literal="'a'", qualified_name="System.Char"),
    ValueKind(name="byte", literal="224", qualified_name="System.Byte"),
    ValueKind(name="int", literal="103", qualified_name="System.Int32"),
    ValueKind(name="long", literal="-123456789L", qualified_name="System.Int64"),
    ValueKind(name="ulong", literal="123456789UL", qualified_name="System.UInt64"),
    ValueKind(
        name="Vector3",
        literal="new Vector3(29, 1, 10)",
        qualified_name="UnityEngine.Vector3",
    ),
    ValueKind(
        name="ClassWithNoConstructor",
        literal="new ClassWithNoConstructor { a = 10 }",
        qualified_name=f"{_SUPPORT_NAMESPACE}.ClassWithNoConstructor",
        declaration=_CLASS_WITH_NO_CONSTRUCTOR,
    ),
    ValueKind(
        name="ClassWithConstructor",
        literal="new ClassWithConstructor(29)",
        qualified_name=f"{_SUPPORT_NAMESPACE}.ClassWithConstructor",
        declaration=_CLASS_WITH_CONSTRUCTOR,
    ),
)


class ValueCatalog:
    """Closed lookup table over a fixed set of value kinds.

    Iteration follows declaration order, which is also the order the
    host constants and test cells are emitted in.
    """

    def __init__(self, kinds: Iterable[ValueKind] = DEFAULT_VALUE_KINDS) -> None:
        self._kinds: dict[str, ValueKind] = {}
        literals: set[str] = set()
        for kind in kinds:
            if kind.name in self._kinds:
                raise ValueError(f"Duplicate value kind: {kind.name}")
            if kind.literal in literals:
                raise ValueError(f"Duplicate literal for value kind {kind.name}: {kind.literal}")
            self._kinds[kind.name] = kind
            literals.add(kind.literal)

    def __iter__(self):
        return iter(self._kinds.values())

    def __len__(self) -> int:
        return len(self._kinds)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    @property
    def names(self) -> list[str]:
        return list(self._kinds)

    def get(self, name: str) -> ValueKind:
        try:
            return self._kinds[name]
        except KeyError:
            raise UnknownValueKindError(
                f"Unknown value kind '{name}'. Known: {', '.join(self._kinds)}"
            ) from None

    def literal_for(self, name: str) -> str:
        """C# expression producing the expected value for *name*."""
        return self.get(name).literal

    def qualified_type_name_for(self, name: str) -> str:
        """Type name the guard runtime reports for *name*."""
        return self.get(name).qualified_name

    def constant_name(self, name: str) -> str:
        """Host-level constant holding the expected value."""
        return f"Expected_{self.get(name).name}"

    def declarations(self) -> list[str]:
        """Auxiliary type definitions, in catalog order."""
        return [kind.declaration for kind in self._kinds.values() if kind.declaration]
