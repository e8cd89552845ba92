"""Tests for template selection, rendering, linting and formatting."""

import pytest

from jscodegen.codegen import (
    CodegenOptions,
    TemplateBundle,
    beautify_source,
    generate,
    get_code,
    get_flow_code,
    get_javascript_code,
    get_typescript_code,
    load_templates,
)
from jscodegen.context_builder import build_context
from jscodegen.errors import InvalidCustomTemplate, LintFailure, UnsupportedSpecVersion, UnsupportedTarget
from jscodegen.lint import LintOptions, lint_source

_LOOP_CLASS = "'use strict';\n{% for method in methods %}{% include 'method' %}{% endfor %}"


class TestLoadTemplates:
    def test_javascript_defaults(self):
        bundle = load_templates("javascript")
        assert "class {{ class_name }}" in bundle.class_
        assert "{{ method.method_name }}(parameters)" in bundle.method
        assert bundle.type is None

    def test_typescript_defaults_include_type(self):
        bundle = load_templates("typescript")
        assert "parameter.ts_type" in bundle.method
        assert "definition.ts_type" in bundle.type

    def test_flow_defaults(self):
        bundle = load_templates("flow")
        assert bundle.class_.startswith("// @flow")
        assert "definition.flow_type" in bundle.type

    def test_partial_override_filled_from_defaults(self):
        bundle = load_templates("javascript", {"method": "// {{ method.method_name }}\n"})
        assert bundle.method == "// {{ method.method_name }}\n"
        assert "class {{ class_name }}" in bundle.class_

    def test_caller_bundle_not_mutated(self):
        template = {"method": "// m\n"}
        load_templates("typescript", template)
        assert template == {"method": "// m\n"}

    def test_custom_requires_class_and_method(self):
        with pytest.raises(InvalidCustomTemplate):
            load_templates("custom", {"class": "x"})
        with pytest.raises(InvalidCustomTemplate):
            load_templates("custom", None)
        with pytest.raises(UnsupportedTarget):
            load_templates("custom", {"method": "x"})

    def test_custom_bundle_used_as_is(self):
        bundle = load_templates("custom", TemplateBundle(class_="c", method="m"))
        assert bundle == TemplateBundle(class_="c", method="m")

    def test_unknown_target(self):
        with pytest.raises(UnsupportedTarget):
            load_templates("python")


class TestJavaScriptCode:
    def test_minimal_spec_round_trip(self, minimal_spec):
        code = get_javascript_code(CodegenOptions(swagger=minimal_spec))
        assert code.strip()
        assert "class Client" in code
        assert "getPing(parameters)" in code
        findings = lint_source(code, LintOptions(esnext=True, trailing=False))
        assert [f for f in findings if f.is_error] == []

    def test_petstore(self, petstore_spec):
        code = get_javascript_code(CodegenOptions(swagger=petstore_spec, class_name="PetClient"))
        for name in ("listPets", "createPet", "getPetsByPetId", "deletePetsByPetId"):
            assert f"{name}(parameters)" in code
        assert "setToken(" in code
        assert "setApiKey(" in code
        assert "setBasicAuth(" not in code
        assert "https://petstore.example.com/v1" in code
        assert "export default PetClient;" in code
        findings = lint_source(code, LintOptions(esnext=True, trailing=False))
        assert [f for f in findings if f.is_error] == []

    def test_beautify_toggle(self, minimal_spec):
        raw = get_javascript_code(CodegenOptions(swagger=minimal_spec, beautify=False))
        assert get_javascript_code(CodegenOptions(swagger=minimal_spec)) == beautify_source(raw)

    def test_lint_never_runs_for_builtin_targets(self, minimal_spec):
        broken = {"method": "    var = ;\n"}
        code = get_javascript_code(CodegenOptions(swagger=minimal_spec, template=broken, lint=True, beautify=False))
        assert "var = ;" in code


class TestTypeScriptCode:
    @classmethod
    def setup_class(cls):
        from conftest import PETSTORE_SPEC

        cls.code = get_typescript_code(CodegenOptions(
            swagger=PETSTORE_SPEC,
            class_name="PetClient",
            imports=["import fetch from 'node-fetch';"],
            beautify=False,
        ))

    def test_definitions_rendered(self):
        assert "export type Pet = { id: number; name: string; tag?: string };" in self.code
        assert "export type Error = { code?: number; message?: string };" in self.code

    def test_class_and_imports(self):
        assert "import fetch from 'node-fetch';" in self.code
        assert "export class PetClient {" in self.code

    def test_method_signatures(self):
        assert "Promise<Pet[]>" in self.code
        assert "limit?: number;" in self.code
        assert "body: Pet;" in self.code
        assert "}): Promise<any> {" in self.code

    def test_minimal_round_trip(self, minimal_spec):
        code = get_typescript_code(CodegenOptions(swagger=minimal_spec))
        assert "getPing(" in code

    def test_rejects_swagger_1_2_without_rendering(self, monkeypatch, minimal_spec):
        def fail(*args, **kwargs):
            raise AssertionError("render must not be called")

        monkeypatch.setattr("jscodegen.codegen.render", fail)
        minimal_spec["swagger"] = "1.2"
        with pytest.raises(UnsupportedSpecVersion):
            get_typescript_code(CodegenOptions(swagger=minimal_spec))


class TestFlowCode:
    def test_reserved_definition_names(self, petstore_spec):
        code = get_flow_code(CodegenOptions(swagger=petstore_spec, beautify=False))
        assert code.startswith("// @flow")
        assert "export type ErrorType = {| code?: number, message?: string |};" in code
        assert "limit?: number," in code


class TestCustomCode:
    def test_renders_with_partials(self, petstore_spec):
        template = {"class": _LOOP_CLASS, "method": "function {{ method.method_name }}() {}\n"}
        code = get_code(CodegenOptions(swagger=petstore_spec, template=template), "custom")
        assert "function listPets()" in code
        assert "function deletePetsByPetId()" in code

    def test_missing_method_template(self, petstore_spec):
        with pytest.raises(InvalidCustomTemplate):
            get_code(CodegenOptions(swagger=petstore_spec, template={"class": "x"}), "custom")

    def test_lint_error_aborts(self, petstore_spec):
        template = {"class": _LOOP_CLASS, "method": "var = {{ method.method_name }};\n"}
        with pytest.raises(LintFailure) as excinfo:
            get_code(CodegenOptions(swagger=petstore_spec, template=template), "custom")
        assert excinfo.value.finding.code == "E001"
        assert "(E001)" in str(excinfo.value)
        assert "var = listPets;" in str(excinfo.value)

    def test_lint_disabled(self, petstore_spec):
        template = {"class": _LOOP_CLASS, "method": "var = {{ method.method_name }};\n"}
        code = get_code(CodegenOptions(swagger=petstore_spec, template=template, lint=False, beautify=False), "custom")
        assert "var = listPets;" in code

    def test_warnings_ignored(self, petstore_spec):
        template = {"class": "{{ title }}Name = 1;   \n", "method": ""}
        code = get_code(CodegenOptions(swagger=petstore_spec, template=template, beautify=False), "custom")
        assert code == "PetstoreName = 1;   \n"

    def test_extra_context_wins(self, petstore_spec):
        template = {"class": "{{ title }}|{{ banner }}", "method": ""}
        options = CodegenOptions(
            swagger=petstore_spec,
            template=template,
            extra_context={"title": "Override", "banner": "generated"},
            lint=False,
            beautify=False,
        )
        assert get_code(options, "custom") == "Override|generated"


class TestGenerate:
    def test_renders_prebuilt_view(self, minimal_spec):
        view = build_context(minimal_spec, "custom")
        options = CodegenOptions(
            swagger=minimal_spec,
            template=TemplateBundle(class_="{{ methods | length }} {{ methods[0].method_name }}", method=""),
            lint=False,
            beautify=False,
        )
        assert generate(view, "custom", options) == "1 getPing"
