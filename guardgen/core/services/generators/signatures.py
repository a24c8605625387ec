"""
Signature formatter — member names and the signatures diagnostics quote.

Names concatenate every axis label, so they are unique across the
cross-product within one host type.  Qualified signatures follow the
runtime's ``<return> <ns>.<type>::<member>(<params>)`` spelling, using
CLR full names rather than C# keywords.
"""

from __future__ import annotations

from guardgen.core.models.axes import AttributeKind, BaseType, CallShape, ValueKind
from guardgen.core.services.generators.value_catalog import ValueCatalog

VOID_TYPE = "System.Void"


def host_type_name(base_type: BaseType) -> str:
    """Name of the generated host type deriving from *base_type*."""
    return base_type.host_type_name


def fixture_type_name(base_type: BaseType) -> str:
    return base_type.fixture_type_name


def callable_name(attribute: AttributeKind, value_kind: ValueKind, shape: CallShape) -> str:
    if shape is CallShape.OUT:
        return f"{attribute.name}_{value_kind.name}_out_Function"
    return f"{attribute.name}_{value_kind.name}_Function"


def case_name(attribute: AttributeKind, value_kind: ValueKind, shape: CallShape) -> str:
    if shape is CallShape.OUT:
        return f"{attribute.name}_{value_kind.name}_setsOutValue"
    return f"{attribute.name}_{value_kind.name}_returnsValue"


def fallback_expression(value_kind: ValueKind) -> str:
    """What an inactive guard leaves behind, as a C# expression of *value_kind*."""
    return f"default({value_kind.name})"


def qualified_signature(
    namespace: str,
    host: str,
    callable_: str,
    value_kind: ValueKind,
    shape: CallShape,
    catalog: ValueCatalog,
) -> str:
    """Render the signature a guard warning references.

    Direct return:  ``System.Int32 NS.Host::Attr_int_Function()``
    Out parameter:  ``System.Void NS.Host::Attr_int_out_Function(System.Int32&)``
    """
    type_name = catalog.qualified_type_name_for(value_kind.name)
    member = f"{namespace}.{host}::{callable_}"
    if shape is CallShape.OUT:
        return f"{VOID_TYPE} {member}({type_name}&)"
    return f"{type_name} {member}()"
