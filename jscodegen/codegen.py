"""Render the view model into client source code.

Picks the class/method/type templates for a target (built-in defaults from
templates/, or a caller-supplied bundle), renders them with Jinja2, lints
the result for non-pretyped targets and formats it with jsbeautifier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

import jinja2
import jsbeautifier

from .context_builder import build_context, check_version
from .errors import InvalidCustomTemplate, UnsupportedTarget
from .lint import LintOptions, check_source
from .view_model import ViewModel

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

TARGETS = ("javascript", "typescript", "flow", "custom")

# Targets whose output is never linted.
PRETYPED_TARGETS = ("javascript", "typescript", "flow")

BEAUTIFY_OPTIONS = {"indent_size": 4, "max_preserve_newlines": 2}


@dataclass(frozen=True)
class TemplateBundle:
    """Template sources: `class` is rendered, `method`/`type` are includable partials."""

    class_: str | None = None
    method: str | None = None
    type: str | None = None

    @classmethod
    def coerce(cls, template: TemplateBundle | Mapping[str, str] | None) -> TemplateBundle:
        if template is None:
            return cls()
        if isinstance(template, TemplateBundle):
            return template
        if not isinstance(template, Mapping):
            raise InvalidCustomTemplate()
        return cls(class_=template.get("class"), method=template.get("method"), type=template.get("type"))

    def partials(self) -> dict[str, str]:
        partials = {"method": self.method or ""}
        if self.type is not None:
            partials["type"] = self.type
        return partials


@dataclass
class CodegenOptions:
    swagger: dict[str, Any]
    class_name: str = "Client"
    module_name: str | None = None
    imports: list[str] = field(default_factory=list)
    template: TemplateBundle | Mapping[str, str] | None = None
    extra_context: Mapping[str, Any] = field(default_factory=dict)
    esnext: bool = False
    lint: bool | None = None
    beautify: bool = True
    is_es6: bool = False


def _read_template(name: str) -> str:
    return (TEMPLATE_DIR / f"{name}.j2").read_text(encoding="utf-8")


def load_templates(target: str, template: TemplateBundle | Mapping[str, str] | None = None) -> TemplateBundle:
    """Return the templates for `target`, filling gaps from the built-in defaults."""
    bundle = TemplateBundle.coerce(template)
    if target == "custom":
        if not isinstance(bundle.class_, str) or not isinstance(bundle.method, str):
            raise InvalidCustomTemplate()
        return bundle
    if target not in PRETYPED_TARGETS:
        raise UnsupportedTarget(f"Unsupported target {target!r}; expected one of {', '.join(TARGETS)}")

    method_name = f"{target}-method" if target in ("typescript", "flow") else "method"
    type_name = {"typescript": "type", "flow": "flow-type"}.get(target)
    return replace(
        bundle,
        class_=bundle.class_ or _read_template(f"{target}-class"),
        method=bundle.method or _read_template(method_name),
        type=bundle.type or (_read_template(type_name) if type_name else None),
    )


def render(templates: TemplateBundle, context: Mapping[str, Any]) -> str:
    """Render the class template with the partials available to {% include %}."""
    env = jinja2.Environment(
        loader=jinja2.DictLoader(templates.partials()),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env.from_string(templates.class_ or "").render(context)


def beautify_source(source: str) -> str:
    opts = jsbeautifier.default_options()
    opts.indent_size = BEAUTIFY_OPTIONS["indent_size"]
    opts.max_preserve_newlines = BEAUTIFY_OPTIONS["max_preserve_newlines"]
    return jsbeautifier.beautify(source, opts)


def generate(view: ViewModel, target: str, options: CodegenOptions) -> str:
    """Render `view` for `target` and run the lint/format passes."""
    templates = load_templates(target, options.template)

    context = view.to_context()
    context.update(options.extra_context)

    source = render(templates, context)
    logger.debug("Rendered %s source (%d chars)", target, len(source))

    should_lint = options.lint is None or options.lint
    if target not in PRETYPED_TARGETS and should_lint:
        check_source(source, LintOptions(esnext=options.esnext))

    if options.beautify:
        source = beautify_source(source)
    return source


def get_code(options: CodegenOptions, target: str) -> str:
    """Build the view model from `options.swagger` and render it for `target`."""
    load_templates(target, options.template)
    view = build_context(
        options.swagger,
        target,
        class_name=options.class_name,
        module_name=options.module_name,
        imports=options.imports,
        is_es6=options.is_es6,
    )
    return generate(view, target, options)


def get_typescript_code(options: CodegenOptions) -> str:
    check_version(options.swagger)
    return get_code(options, "typescript")


def get_javascript_code(options: CodegenOptions) -> str:
    return get_code(options, "javascript")


def get_flow_code(options: CodegenOptions) -> str:
    return get_code(options, "flow")


def get_custom_code(options: CodegenOptions) -> str:
    return get_code(options, "custom")
