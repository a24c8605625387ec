"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from guardgen.core.models import GeneratorConfig, AttributeKind, GeneratedFile
"""

from guardgen.core.models.axes import (
    AttributeKind,
    BaseType,
    CallShape,
    CellKey,
    GeneratorConfig,
    GuardFamily,
    ValueKind,
)
from guardgen.core.models.template import GeneratedCell, GeneratedFile

__all__ = [
    # axes.py
    "AttributeKind",
    "BaseType",
    "CallShape",
    "CellKey",
    # template.py
    "GeneratedCell",
    "GeneratedFile",
    "GeneratorConfig",
    "GuardFamily",
    "ValueKind",
]
