"""
CLI commands for test-suite generation.

Thin wrappers over ``guardgen.core.use_cases.generate`` and the
attribute suite generator.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _resolve_project_root(ctx: click.Context) -> Path:
    """Resolve project root from context or CWD."""
    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is None:
        from guardgen.core.config.loader import find_config_file

        config_path = find_config_file()
    return config_path.parent.resolve() if config_path else Path.cwd()


@click.group()
def generate() -> None:
    """Generate — attribute test suites and their cell matrix."""


# ── Attribute suite ─────────────────────────────────────────────


@generate.command("attributes")
@click.option("--out", "output_dir", default=None, help="Output directory (relative to project root).")
@click.option("--overwrite", is_flag=True, help="Replace an existing file with different content.")
@click.option("--dry-run", is_flag=True, help="Render without writing.")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the generated source.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def attributes(
    ctx: click.Context,
    output_dir: str | None,
    overwrite: bool,
    dry_run: bool,
    to_stdout: bool,
    as_json: bool,
) -> None:
    """Generate the guarded-attribute test suite."""
    from guardgen.core.services.generators.cells import AttributeFamilyError
    from guardgen.core.services.generators.value_catalog import UnknownValueKindError
    from guardgen.core.use_cases.generate import run_generate

    project_root = _resolve_project_root(ctx)
    try:
        result = run_generate(
            project_root,
            ctx.obj.get("config_path"),
            output_dir=output_dir,
            overwrite=overwrite,
            dry_run=dry_run or to_stdout,
        )
    except (AttributeFamilyError, UnknownValueKindError) as e:
        click.secho(f"❌ Generation aborted: {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        for err in result.errors:
            click.secho(f"❌ {err}", fg="red", err=True)
        sys.exit(1)

    assert result.file is not None  # guaranteed when ok
    if to_stdout:
        click.echo(result.file.content, nl=False)
        return

    quiet = ctx.obj.get("quiet", False)
    if result.dry_run:
        click.secho(f"📝 Would write {result.file.path}", fg="cyan")
    elif result.changed:
        click.secho(f"✅ Wrote {result.file.path}", fg="green")
    else:
        click.secho(f"✅ {result.file.path} is up to date", fg="green")

    if not quiet:
        click.echo(f"   Cells:      {result.cells}")
        click.echo(f"   Test cases: {result.cells * 2}")


# ── Matrix ──────────────────────────────────────────────────────


@generate.command("matrix")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def matrix(ctx: click.Context, as_json: bool) -> None:
    """List every cell of the cross-product in emission order."""
    from guardgen.core.config.loader import ConfigError, load_config
    from guardgen.core.services.generators.attribute_suite import iter_cells
    from guardgen.core.services.generators.signatures import callable_name, host_type_name

    try:
        config = load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    cells = [
        {
            "host": host_type_name(cell.base_type),
            "attribute": cell.attribute.name,
            "value_kind": cell.value_kind.name,
            "shape": cell.shape.value,
            "member": callable_name(cell.attribute, cell.value_kind, cell.shape),
            "silent": cell.attribute.silent,
        }
        for cell in iter_cells(config)
    ]

    if as_json:
        click.echo(json.dumps({"cells": cells, "total": len(cells)}, indent=2))
        return

    click.secho(f"🧮 Cells ({len(cells)}):", fg="cyan", bold=True)
    for c in cells:
        marker = " (silent)" if c["silent"] else ""
        click.echo(f"   {c['host']}.{c['member']}{marker}")
    click.echo(f"\n   Test cases: {len(cells) * 2}")
    click.echo()
