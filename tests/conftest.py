"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from guardgen.core.config.loader import default_config
from guardgen.core.models import AttributeKind, BaseType, GeneratorConfig, GuardFamily, ValueKind
from guardgen.core.services.generators.value_catalog import ValueCatalog


@pytest.fixture
def config() -> GeneratorConfig:
    """The stock attribute suite configuration."""
    return default_config()


@pytest.fixture
def catalog(config: GeneratorConfig) -> ValueCatalog:
    return ValueCatalog(config.value_kinds)


@pytest.fixture
def small_config() -> GeneratorConfig:
    """One family-A attribute on host HostX in namespace NS, int only."""
    return GeneratorConfig(
        namespace="NS",
        attributes=[AttributeKind(name="RequiresA", family=GuardFamily.SERVER)],
        base_types=[BaseType(name="NetworkBehaviour", host_name="HostX")],
        value_kinds=[ValueKind(name="int", literal="103", qualified_name="System.Int32")],
    )


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a guardgen.yml into tmp_path and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "guardgen.yml"
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
