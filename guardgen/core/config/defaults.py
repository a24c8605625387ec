"""
Built-in axes — the stock attribute suite used when no guardgen.yml exists.
"""

from __future__ import annotations

from typing import Any

from guardgen.core.models.axes import AttributeKind, BaseType, GuardFamily
from guardgen.core.services.generators.value_catalog import DEFAULT_VALUE_KINDS

DEFAULT_ATTRIBUTES: tuple[AttributeKind, ...] = (
    AttributeKind(name="Client", family=GuardFamily.CLIENT),
    AttributeKind(name="Server", family=GuardFamily.SERVER),
    AttributeKind(name="ClientCallback", family=GuardFamily.CLIENT, silent=True),
    AttributeKind(name="ServerCallback", family=GuardFamily.SERVER, silent=True),
)

# MonoBehaviour and plain classes are supported hosts but the weaver only
# processes NetworkBehaviour, so the stock suite covers that one.
DEFAULT_BASE_TYPES: tuple[BaseType, ...] = (BaseType(name="NetworkBehaviour"),)


def default_config_data(support_namespace: str | None = None) -> dict[str, Any]:
    """Stock axes as plain data, ready to be overlaid by a config file.

    The stock reference kinds are declared in the support namespace, so
    their qualified names follow *support_namespace* when one is given.
    """
    kinds = [v.model_dump(mode="json") for v in DEFAULT_VALUE_KINDS]
    if support_namespace:
        for kind in kinds:
            if kind["declaration"]:
                kind["qualified_name"] = f"{support_namespace}.{kind['name']}"
    return {
        "attributes": [a.model_dump(mode="json") for a in DEFAULT_ATTRIBUTES],
        "base_types": [b.model_dump(mode="json") for b in DEFAULT_BASE_TYPES],
        "value_kinds": kinds,
    }
