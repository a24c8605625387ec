"""
Tests for the attribute suite generator — assembly, ordering, determinism.
"""

import re

import pytest

from guardgen.core.models import AttributeKind, BaseType, CallShape, GuardFamily
from guardgen.core.services.generators.attribute_suite import (
    HEADER,
    assemble_document,
    assemble_fixture,
    assemble_host,
    cell_count,
    generate_attribute_suite,
    iter_cells,
    render_attribute_suite,
)
from guardgen.core.services.generators.cells import AttributeFamilyError


# ═══════════════════════════════════════════════════════════════════
#  iter_cells
# ═══════════════════════════════════════════════════════════════════


class TestIterCells:
    def test_cardinality(self, config):
        """4 attributes × 1 base × 11 kinds × 2 shapes."""
        cells = list(iter_cells(config))
        assert len(cells) == 4 * 1 * 11 * 2
        assert cell_count(config) == len(cells)

    def test_no_duplicates(self, config):
        """Every cell key appears once."""
        keys = [
            (c.base_type.name, c.attribute.name, c.value_kind.name, c.shape)
            for c in iter_cells(config)
        ]
        assert len(keys) == len(set(keys))

    def test_order_attributes_outer_kinds_inner_return_first(self, config):
        """Attributes outer, kinds inner, return before out."""
        cells = list(iter_cells(config))
        assert [(c.attribute.name, c.value_kind.name, c.shape) for c in cells[:4]] == [
            ("Client", "float", CallShape.RETURN),
            ("Client", "float", CallShape.OUT),
            ("Client", "double", CallShape.RETURN),
            ("Client", "double", CallShape.OUT),
        ]
        assert cells[22].attribute.name == "Server"

    def test_shape_order_fixed_even_if_configured_reversed(self, config):
        """Configured shape order does not change emission order."""
        reversed_cfg = config.model_copy(update={"shapes": [CallShape.OUT, CallShape.RETURN]})
        shapes = [c.shape for c in list(iter_cells(reversed_cfg))[:2]]
        assert shapes == [CallShape.RETURN, CallShape.OUT]

    def test_single_base_type(self, config):
        """Passing a base type restricts the walk to it."""
        two = config.model_copy(
            update={"base_types": [BaseType(name="NetworkBehaviour"), BaseType(name="MonoBehaviour")]}
        )
        cells = list(iter_cells(two, two.base_types[1]))
        assert {c.base_type.name for c in cells} == {"MonoBehaviour"}
        assert len(cells) == 88


# ═══════════════════════════════════════════════════════════════════
#  assemble_host / assemble_fixture
# ═══════════════════════════════════════════════════════════════════


class TestAssembleHost:
    def test_constants_declared_once_per_kind(self, catalog):
        """One static readonly constant per value kind."""
        host = assemble_host(BaseType(name="NetworkBehaviour"), [], catalog)
        assert host.startswith("public class AttributeBehaviour_NetworkBehaviour : NetworkBehaviour\n{")
        for kind in catalog:
            assert host.count(f" Expected_{kind.name} = ") == 1
        assert "    public static readonly int Expected_int = 103;" in host
        assert (
            "    public static readonly ClassWithNoConstructor Expected_ClassWithNoConstructor"
            " = new ClassWithNoConstructor { a = 10 };"
        ) in host

    def test_members_indented_after_constants(self, catalog):
        """Members follow the constants at class-body indentation."""
        host = assemble_host(BaseType(name="NetworkBehaviour"), ["[Server]\npublic void F()\n{\n}"], catalog)
        assert "\n\n    [Server]\n    public void F()\n    {\n    }\n}" in host


class TestAssembleFixture:
    def test_component_host_lifecycle(self):
        """Component host → GameObject setup and teardown."""
        fixture = assemble_fixture(BaseType(name="NetworkBehaviour"), [])
        assert fixture == (
            "public class AttributeTest_NetworkBehaviour\n"
            "{\n"
            "    AttributeBehaviour_NetworkBehaviour behaviour;\n"
            "    GameObject go;\n"
            "\n"
            "    [OneTimeSetUp]\n"
            "    public void SetUp()\n"
            "    {\n"
            "        go = new GameObject();\n"
            "        behaviour = go.AddComponent<AttributeBehaviour_NetworkBehaviour>();\n"
            "    }\n"
            "\n"
            "    [OneTimeTearDown]\n"
            "    public void TearDown()\n"
            "    {\n"
            "        UnityEngine.Object.DestroyImmediate(go);\n"
            "        NetworkClient.connectState = ConnectState.None;\n"
            "        NetworkServer.active = false;\n"
            "    }\n"
            "}"
        )

    def test_plain_host_lifecycle(self):
        """Plain host → constructed with new, no GameObject."""
        fixture = assemble_fixture(BaseType(name="PlainHost", component=False), [])
        assert "GameObject" not in fixture
        assert "behaviour = new AttributeBehaviour_PlainHost();" in fixture
        assert "NetworkServer.active = false;" in fixture


# ═══════════════════════════════════════════════════════════════════
#  assemble_document / render_attribute_suite
# ═══════════════════════════════════════════════════════════════════


class TestAssembleDocument:
    def test_header_usings_and_namespaces(self, config, catalog):
        """Header, usings, support and target namespaces."""
        doc = assemble_document(config, ["// block"], catalog)
        lines = doc.splitlines()
        assert lines[0] == HEADER
        assert lines[1] == "using Mirror.Tests.Generators;"
        assert "using NUnit.Framework;" in lines
        assert "namespace Mirror.Tests.Generators" in lines
        assert "namespace Mirror.Tests.Generated.Attributes" in lines
        assert doc.endswith("    // block\n}\n")

    def test_no_support_namespace_without_declarations(self, small_config):
        """No declared kinds → no support namespace block."""
        doc = render_attribute_suite(small_config)
        assert "namespace Mirror.Tests.Generators" not in doc
        assert "using Mirror.Tests.Generators;" not in doc
        assert "namespace NS\n{" in doc


class TestRenderAttributeSuite:
    def test_member_and_test_counts(self, config):
        """88 members and 88 tests with two cases each."""
        doc = render_attribute_suite(config)
        members = re.findall(r"^        \[(Client|Server|ClientCallback|ServerCallback)\]$", doc, re.M)
        assert len(members) == 88
        assert doc.count("[TestCase(true)]") == 88
        assert doc.count("[TestCase(false)]") == 88

    def test_diagnostics_only_for_reporting_attributes(self, config):
        """Only Client and Server cells expect a warning."""
        doc = render_attribute_suite(config)
        # Client + Server, 11 kinds, 2 shapes
        assert doc.count("LogAssert.Expect(") == 44
        assert "called when clientcallback was not active" not in doc
        assert "called when servercallback was not active" not in doc

    def test_deterministic(self, config):
        """Same config → same bytes."""
        assert render_attribute_suite(config) == render_attribute_suite(config)

    def test_host_precedes_fixture_per_base_type(self, config):
        """Each host is followed by its own fixture."""
        two = config.model_copy(
            update={"base_types": [BaseType(name="NetworkBehaviour"), BaseType(name="MonoBehaviour")]}
        )
        doc = render_attribute_suite(two)
        order = [
            doc.index("class AttributeBehaviour_NetworkBehaviour "),
            doc.index("class AttributeTest_NetworkBehaviour"),
            doc.index("class AttributeBehaviour_MonoBehaviour "),
            doc.index("class AttributeTest_MonoBehaviour"),
        ]
        assert order == sorted(order)

    def test_braces_balance(self, config):
        """Braces outside string literals balance."""
        doc = render_attribute_suite(config)
        stripped = re.sub(r'"(?:\\.|[^"\\])*"', '""', doc)
        assert stripped.count("{") == stripped.count("}")

    def test_unclassified_attribute_aborts(self, config):
        """An attribute without a family aborts the whole suite."""
        bad = AttributeKind.model_construct(name="Target", family=None, silent=False)
        cfg = config.model_copy(update={"attributes": [*config.attributes, bad]})
        with pytest.raises(AttributeFamilyError):
            render_attribute_suite(cfg)


class TestGenerateAttributeSuite:
    def test_generated_file(self, config):
        """GeneratedFile path, flags and reason."""
        result = generate_attribute_suite(config)
        assert result.path == "Assets/Mirror/Tests/Generated/AttributeTest.cs"
        assert result.overwrite is False
        assert "4 attribute(s)" in result.reason
        assert result.content == render_attribute_suite(config)

    def test_scenario_document(self, small_config):
        """RequiresA on HostX → both signatures quoted."""
        content = generate_attribute_suite(small_config).content
        assert "public class HostX : NetworkBehaviour" in content
        assert "public class AttributeTest_NetworkBehaviour" in content
        assert (
            "\"[RequiresA] function 'System.Int32 NS.HostX::RequiresA_int_Function()' "
            "called when requiresa was not active\""
        ) in content
        assert (
            "\"[RequiresA] function 'System.Void NS.HostX::RequiresA_int_out_Function(System.Int32&)' "
            "called when requiresa was not active\""
        ) in content

    def test_family_b_attribute(self, small_config):
        """Client-family attribute drives connectState only."""
        cfg = small_config.model_copy(
            update={"attributes": [AttributeKind(name="RequiresB", family=GuardFamily.CLIENT)]}
        )
        content = generate_attribute_suite(cfg).content
        assert "ConnectState.Connected" in content
        assert "NetworkServer.active = active;" not in content
