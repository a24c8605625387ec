"""
Generated output models — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedCell(BaseModel):
    """The paired fragments produced for one cross-product point.

    Attributes:
        member: Guarded member definition for the host type.
        test:   Parameterized test method (one true + one false case).
    """

    member: str
    test: str


class GeneratedFile(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:      Relative path from project root.
        content:   Full file content.
        overwrite: Whether to overwrite if already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
