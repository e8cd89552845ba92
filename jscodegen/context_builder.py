"""Build the template view model from a Swagger 2.0 document.

Walks paths in document order (verbs in declared order within a path),
builds one Method per accepted verb, then maps every schema definition.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import UnsupportedSpecVersion
from .loader import get_definitions, get_paths
from .naming import build_method_name, unique_name
from .schema_parser import get_response_type, parse_parameters
from .security import resolve_security
from .type_converter import FLOW, TYPESCRIPT, FlowConverter, TypeScriptConverter
from .view_model import Definition, Header, Method, ViewModel

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = "2.0"

AUTHORIZED_METHODS = (
    "GET", "POST", "PUT", "DELETE", "PATCH", "COPY", "HEAD", "OPTIONS",
    "LINK", "UNLINK", "PURGE", "LOCK", "UNLOCK", "PROPFIND",
)


def check_version(spec: dict[str, Any]) -> None:
    version = spec.get("swagger")
    if version != SUPPORTED_VERSION:
        raise UnsupportedSpecVersion(version)


def make_domain(spec: dict[str, Any]) -> str:
    """scheme://host/basePath, or '' when any part is missing."""
    schemes = spec.get("schemes") or []
    host = spec.get("host")
    base_path = spec.get("basePath")
    if not (schemes and host and base_path):
        return ""
    return f"{schemes[0]}://{host}{base_path.rstrip('/')}"


def _make_headers(spec: dict[str, Any], operation: dict[str, Any]) -> list[Header]:
    headers = []
    produces = operation["produces"] if "produces" in operation else spec.get("produces")
    if produces is not None:
        headers.append(Header("Accept", "'" + ", ".join(produces) + "'"))
    consumes = operation["consumes"] if "consumes" in operation else spec.get("consumes")
    if consumes is not None:
        headers.append(Header("Content-Type", "'" + ",".join(consumes) + "'"))
    return headers


def _path_parameters(path_item: dict[str, Any]) -> list[dict[str, Any]]:
    """Shared parameters declared on the path itself rather than on a verb."""
    params: list[dict[str, Any]] = []
    for key, value in path_item.items():
        if key.lower() == "parameters":
            params = value or []
    return params


def build_method(
    spec: dict[str, Any],
    path: str,
    verb: str,
    operation: dict[str, Any],
    path_params: list[dict[str, Any]],
    seen_names: set[str],
    class_name: str | None = None,
) -> Method:
    """Build one Method; `seen_names` is the per-view-model uniqueness set."""
    name = unique_name(build_method_name(operation, verb, path), seen_names)
    return Method(
        path=path,
        http_verb=verb.upper(),
        method_name=name,
        summary=operation.get("description") or operation.get("summary"),
        security=resolve_security(spec, operation),
        response=get_response_type(operation, spec),
        parameters=parse_parameters(operation.get("parameters"), path_params, spec),
        headers=_make_headers(spec, operation),
        class_name=class_name,
        external_docs=operation.get("externalDocs"),
    )


def map_definitions(
    spec: dict[str, Any],
    target: str,
    flow: FlowConverter = FLOW,
    typescript: TypeScriptConverter = TYPESCRIPT,
) -> list[Definition]:
    """Map every schema definition, in document order."""
    definitions = []
    for name, schema in get_definitions(spec).items():
        definitions.append(Definition(
            name=flow.sanitize_reserved_words(name) if target == "flow" else name,
            description=schema.get("description"),
            ts_type=typescript.convert_type(schema, spec),
            flow_type=flow.convert_type(schema, spec),
        ))
    return definitions


def build_context(
    spec: dict[str, Any],
    target: str = "typescript",
    *,
    class_name: str | None = None,
    module_name: str | None = None,
    imports: list[str] | None = None,
    is_es6: bool = False,
) -> ViewModel:
    """Build the full view model from the Swagger document."""
    check_version(spec)
    info = spec.get("info") or {}
    view = ViewModel(
        title=info.get("title", ""),
        version=info.get("version", ""),
        domain=make_domain(spec),
        is_secure="securityDefinitions" in spec,
        class_name=class_name,
        module_name=module_name,
        imports=list(imports or []),
        is_es6=is_es6 or target == "javascript",
    )
    seen_names: set[str] = set()

    for path, path_item in get_paths(spec).items():
        path_params = _path_parameters(path_item)
        for verb, operation in path_item.items():
            if verb.upper() not in AUTHORIZED_METHODS:
                if verb.lower() != "parameters":
                    logger.debug("Skipping unsupported verb %r on %s", verb, path)
                continue
            method = build_method(spec, path, verb, operation, path_params, seen_names, class_name)
            view.add_method(method)

    view.definitions = map_definitions(spec, target)
    logger.debug("Built view model: %d methods, %d definitions", len(view.methods), len(view.definitions))
    return view
