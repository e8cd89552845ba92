from .codegen import (
    CodegenOptions,
    TemplateBundle,
    generate,
    get_code,
    get_custom_code,
    get_flow_code,
    get_javascript_code,
    get_typescript_code,
)
from .context_builder import build_context
from .errors import (
    CodegenError,
    InvalidCustomTemplate,
    LintFailure,
    SpecError,
    UnresolvedReference,
    UnsupportedSpecVersion,
    UnsupportedTarget,
)
from .loader import load_spec
from .view_model import Definition, Method, Parameter, ParameterLocation, ViewModel

__all__ = [
    "CodegenOptions",
    "TemplateBundle",
    "generate",
    "get_code",
    "get_custom_code",
    "get_flow_code",
    "get_javascript_code",
    "get_typescript_code",
    "build_context",
    "CodegenError",
    "InvalidCustomTemplate",
    "LintFailure",
    "SpecError",
    "UnresolvedReference",
    "UnsupportedSpecVersion",
    "UnsupportedTarget",
    "load_spec",
    "Definition",
    "Method",
    "Parameter",
    "ParameterLocation",
    "ViewModel",
]
