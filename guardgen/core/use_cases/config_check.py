"""
Config check use case — validate guardgen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from guardgen.core.config.loader import ConfigError, find_config_file, load_config
from guardgen.core.models.axes import GeneratorConfig, GuardFamily
from guardgen.core.services.generators.attribute_suite import cell_count


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        cfg = self.config
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "namespace": cfg.namespace if cfg else None,
            "attribute_count": len(cfg.attributes) if cfg else 0,
            "base_type_count": len(cfg.base_types) if cfg else 0,
            "value_kind_count": len(cfg.value_kinds) if cfg else 0,
            "cell_count": cell_count(cfg) if cfg else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    Args:
        config_path: Optional explicit path to guardgen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    if config_path is None:
        result.warnings.append("No guardgen.yml found. Using the built-in axes.")

    # Coverage: both guard families, both reporting styles
    families = {a.family for a in config.attributes}
    for family in GuardFamily:
        if family not in families:
            result.warnings.append(f"No attribute covers the {family.value} family.")

    if not any(a.silent for a in config.attributes):
        result.warnings.append("No silent (callback) attribute defined.")
    if all(a.silent for a in config.attributes):
        result.warnings.append("Every attribute is silent. No diagnostics will be asserted.")

    result.valid = len(result.errors) == 0
    return result
