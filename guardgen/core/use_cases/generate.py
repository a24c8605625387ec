"""
Generate use case — render the attribute suite and hand it to emission.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from guardgen.core.config.loader import ConfigError, load_config
from guardgen.core.models.template import GeneratedFile
from guardgen.core.services.emit import write_generated_file
from guardgen.core.services.generators.attribute_suite import (
    cell_count,
    generate_attribute_suite,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Outcome of one generation run."""

    file: GeneratedFile | None = None
    cells: int = 0
    dry_run: bool = False
    written: bool = False
    changed: bool = False
    target: Path | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.file is not None and not self.errors

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "path": self.file.path if self.file else None,
            "target": str(self.target) if self.target else None,
            "cells": self.cells,
            "test_cases": self.cells * 2,
            "dry_run": self.dry_run,
            "written": self.written,
            "changed": self.changed,
            "errors": self.errors,
        }


def run_generate(
    project_root: Path,
    config_path: Path | None = None,
    *,
    output_dir: str | None = None,
    overwrite: bool = False,
    dry_run: bool = False,
) -> GenerateResult:
    """Generate the attribute suite and write it under *project_root*.

    Configuration errors are reported on the result.  Generation
    errors (an unclassifiable attribute, an unknown value kind) are
    defects in the axes and propagate.

    Args:
        project_root: Directory the output path is relative to.
        config_path: Explicit guardgen.yml; searched for when None.
        output_dir: Overrides the configured output directory.
        overwrite: Replace an existing file with different content.
        dry_run: Render only, never touch the filesystem.
    """
    result = GenerateResult(dry_run=dry_run)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if output_dir is not None:
        config = config.model_copy(update={"output_dir": output_dir})

    generated = generate_attribute_suite(config)
    if overwrite:
        generated = generated.model_copy(update={"overwrite": True})

    result.file = generated
    result.cells = cell_count(config)
    result.target = project_root / generated.path

    if dry_run:
        logger.info("Dry run: not writing %s", result.target)
        return result

    written = write_generated_file(project_root, generated.model_dump())
    if "error" in written:
        result.errors.append(written["error"])
        return result

    result.written = written["written"]
    result.changed = written["changed"]
    return result
