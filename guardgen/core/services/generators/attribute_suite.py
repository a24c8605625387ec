"""
Attribute suite generator — fold every cell into one C# test file.

Layout of the produced document:

    // header
    using ...;

    namespace <support_namespace>      (only if auxiliary types exist)
    {
        <auxiliary value types>
    }

    namespace <namespace>
    {
        <host type>     <fixture>        (per base type)
    }

Enumeration order is fixed: base types, then attributes, then value
kinds, with the direct-return cell before the out-parameter cell.
Any failure aborts the whole run. Nothing is written for a partial suite.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import PurePosixPath

from guardgen.core.models.axes import BaseType, CellKey, GeneratorConfig
from guardgen.core.models.template import GeneratedFile
from guardgen.core.services.generators.cells import RESET_STATEMENTS, generate_cell
from guardgen.core.services.generators.csharp import indent, join_blocks
from guardgen.core.services.generators.signatures import fixture_type_name, host_type_name
from guardgen.core.services.generators.value_catalog import ValueCatalog

logger = logging.getLogger(__name__)

HEADER = "// Generated by guardgen (attribute suite). Do not edit by hand."


def iter_cells(config: GeneratorConfig, base_type: BaseType | None = None) -> Iterator[CellKey]:
    """Yield the cross-product in emission order.

    With *base_type* given, only that host's cells are produced.
    """
    base_types = [base_type] if base_type is not None else config.base_types
    shapes = config.ordered_shapes()
    for base in base_types:
        for attribute in config.attributes:
            for kind in config.value_kinds:
                for shape in shapes:
                    yield CellKey(attribute=attribute, base_type=base, value_kind=kind, shape=shape)


def _block(header: str, body: str) -> str:
    return f"{header}\n{{\n{indent(body)}\n}}"


def assemble_host(base_type: BaseType, members: list[str], catalog: ValueCatalog) -> str:
    """Host type: one shared constant per value kind, then the members."""
    constants = "\n".join(
        f"public static readonly {kind.name} {catalog.constant_name(kind.name)} = {kind.literal};"
        for kind in catalog
    )
    header = f"public class {host_type_name(base_type)} : {base_type.name}"
    return _block(header, join_blocks([constants, *members]))


def assemble_fixture(base_type: BaseType, tests: list[str]) -> str:
    """Test fixture sharing one host instance across all its cases."""
    host = host_type_name(base_type)

    if base_type.component:
        fields = f"{host} behaviour;\nGameObject go;"
        setup = f"go = new GameObject();\nbehaviour = go.AddComponent<{host}>();"
        release = "UnityEngine.Object.DestroyImmediate(go);"
    else:
        fields = f"{host} behaviour;"
        setup = f"behaviour = new {host}();"
        release = "behaviour = null;"

    teardown = "\n".join([release, *RESET_STATEMENTS])
    lifecycle = [
        fields,
        _block("[OneTimeSetUp]\npublic void SetUp()", setup),
        _block("[OneTimeTearDown]\npublic void TearDown()", teardown),
    ]
    return _block(f"public class {fixture_type_name(base_type)}", join_blocks([*lifecycle, *tests]))


def assemble_document(config: GeneratorConfig, blocks: list[str], catalog: ValueCatalog) -> str:
    """Wrap host/fixture blocks with usings and namespaces."""
    usings = list(config.usings)
    declarations = catalog.declarations()
    if declarations and config.support_namespace not in usings:
        usings.insert(0, config.support_namespace)

    parts = [HEADER + "\n" + "\n".join(f"using {u};" for u in usings)]
    if declarations:
        parts.append(_block(f"namespace {config.support_namespace}", join_blocks(declarations)))
    parts.append(_block(f"namespace {config.namespace}", join_blocks(blocks)))
    return join_blocks(parts) + "\n"


def render_attribute_suite(config: GeneratorConfig) -> str:
    """Render the complete document text for *config*."""
    catalog = ValueCatalog(config.value_kinds)
    blocks: list[str] = []

    for base in config.base_types:
        members: list[str] = []
        tests: list[str] = []
        for cell in iter_cells(config, base):
            generated = generate_cell(cell, config, catalog)
            members.append(generated.member)
            tests.append(generated.test)

        logger.debug("Rendered %d cells for %s", len(members), host_type_name(base))
        blocks.append(assemble_host(base, members, catalog))
        blocks.append(assemble_fixture(base, tests))

    return assemble_document(config, blocks, catalog)


def generate_attribute_suite(config: GeneratorConfig) -> GeneratedFile:
    """Generate the attribute test suite as a single C# file.

    Args:
        config: Validated generator configuration.

    Returns:
        GeneratedFile at ``<output_dir>/<artifact>.cs``.
    """
    content = render_attribute_suite(config)
    cells = cell_count(config)
    path = PurePosixPath(config.output_dir) / f"{config.artifact}.cs"

    logger.info("Generated %s: %d cells, %d test cases", path, cells, cells * 2)
    return GeneratedFile(
        path=str(path),
        content=content,
        overwrite=False,
        reason=(
            f"Generated attribute suite: {len(config.attributes)} attribute(s) x "
            f"{len(config.base_types)} base type(s) x {len(config.value_kinds)} value kind(s) x "
            f"{len(config.shapes)} shape(s)"
        ),
    )


def cell_count(config: GeneratorConfig) -> int:
    return (
        len(config.attributes)
        * len(config.base_types)
        * len(config.value_kinds)
        * len(config.ordered_shapes())
    )
