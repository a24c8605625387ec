"""
Diagnostic predictor — the warning a skipped guarded call must log.

The message text is owned by the guard runtime; this module mirrors
it character for character, including the bracketed tag keeping the
attribute's casing while the trailing clause is lower-cased.
"""

from __future__ import annotations

from guardgen.core.models.axes import AttributeKind
from guardgen.core.services.generators.csharp import indent, string_literal

LOG_LEVEL = "LogType.Warning"


def expected_diagnostic(
    attribute: AttributeKind,
    guard_active: bool,
    signature: str,
) -> str | None:
    """Return the warning expected for one call, or None if none is logged.

    Active guards run the body silently; callback-style guards skip
    the body silently.  Only an inactive, non-silent guard warns.
    """
    if guard_active or attribute.silent:
        return None
    return (
        f"[{attribute.name}] function '{signature}' "
        f"called when {attribute.name.lower()} was not active"
    )


def render_log_expectation(message: str) -> str:
    """Render the test-side expectation for the inactive branch."""
    call = f"LogAssert.Expect({LOG_LEVEL}, {string_literal(message)});"
    return f"if (!active)\n{{\n{indent(call)}\n}}"
