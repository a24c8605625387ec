"""
Cell generator — one guarded member and its test per cross-product point.

Each cell yields two fragments at class-body indentation:

    member  a method tagged with the guard attribute that returns (or
            writes to its out parameter) the host's shared constant
    test    an NUnit method run twice via ``[TestCase(true)]`` and
            ``[TestCase(false)]``, toggling the guard's ambient state
            and asserting value plus expected warning

Guard enforcement itself belongs to the runtime weaver; the member
body is unconditional.
"""

from __future__ import annotations

from guardgen.core.models.axes import (
    AttributeKind,
    CallShape,
    CellKey,
    GeneratorConfig,
    GuardFamily,
)
from guardgen.core.models.template import GeneratedCell
from guardgen.core.services.generators.csharp import indent, join_blocks
from guardgen.core.services.generators.diagnostics import (
    expected_diagnostic,
    render_log_expectation,
)
from guardgen.core.services.generators.signatures import (
    callable_name,
    case_name,
    fallback_expression,
    host_type_name,
    qualified_signature,
)
from guardgen.core.services.generators.value_catalog import ValueCatalog


class AttributeFamilyError(ValueError):
    """Raised when an attribute belongs to neither guard family."""


# ── Ambient state per guard family ──────────────────────────────

_ACTIVATE: dict[GuardFamily, str] = {
    GuardFamily.SERVER: "NetworkServer.active = active;",
    GuardFamily.CLIENT: (
        "NetworkClient.connectState = active ? ConnectState.Connected : ConnectState.None;"
    ),
}

# Teardown order: client first, then server.
RESET_STATEMENTS: tuple[str, ...] = (
    "NetworkClient.connectState = ConnectState.None;",
    "NetworkServer.active = false;",
)


def activation_statement(attribute: AttributeKind) -> str:
    """Statement driving *attribute*'s ambient condition to ``active``."""
    try:
        return _ACTIVATE[attribute.family]
    except KeyError:
        raise AttributeFamilyError(
            f"Attribute '{attribute.name}' must belong to the server or client family"
        ) from None


# ── Fragments ───────────────────────────────────────────────────


def render_member(cell: CellKey, catalog: ValueCatalog) -> str:
    """Guarded member returning (or assigning) the shared constant."""
    kind = cell.value_kind.name
    name = callable_name(cell.attribute, cell.value_kind, cell.shape)
    constant = catalog.constant_name(kind)

    if cell.shape is CallShape.OUT:
        header = f"public void {name}(out {kind} value)"
        body = f"value = {constant};"
    else:
        header = f"public {kind} {name}()"
        body = f"return {constant};"

    return f"[{cell.attribute.name}]\n{header}\n{{\n{indent(body)}\n}}"


def render_test(cell: CellKey, config: GeneratorConfig, catalog: ValueCatalog) -> str:
    """Parameterized test for both guard states of one cell."""
    kind = cell.value_kind.name
    host = host_type_name(cell.base_type)
    name = callable_name(cell.attribute, cell.value_kind, cell.shape)

    steps = [
        activation_statement(cell.attribute),
        f"{kind} expected = active ? {host}.{catalog.constant_name(kind)} : {fallback_expression(cell.value_kind)};",
    ]

    signature = qualified_signature(
        config.namespace, host, name, cell.value_kind, cell.shape, catalog
    )
    message = expected_diagnostic(cell.attribute, guard_active=False, signature=signature)
    if message is not None:
        steps.append(render_log_expectation(message))

    if cell.shape is CallShape.OUT:
        steps.append(f"behaviour.{name}(out {kind} actual);")
    else:
        steps.append(f"{kind} actual = behaviour.{name}();")

    steps.append("Assert.AreEqual(expected, actual);")

    header = (
        "[Test]\n"
        "[TestCase(true)]\n"
        "[TestCase(false)]\n"
        f"public void {case_name(cell.attribute, cell.value_kind, cell.shape)}(bool active)"
    )
    return f"{header}\n{{\n{indent(join_blocks(steps))}\n}}"


def generate_cell(cell: CellKey, config: GeneratorConfig, catalog: ValueCatalog) -> GeneratedCell:
    return GeneratedCell(
        member=render_member(cell, catalog),
        test=render_test(cell, config, catalog),
    )
