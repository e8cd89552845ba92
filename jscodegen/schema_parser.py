"""Classify Swagger parameters and pick the success response of an operation.

Handles:
- Path-level shared parameters (appended after the operation's own)
- x-exclude-from-bindings / x-proxy-header parameters (dropped)
- $ref parameters, resolved against the document's `parameters`
- Single-value enums (singleton parameters)
- x-name-pattern query parameters
- integer -> number normalization of the informational `type`
- Last-2xx-wins success responses
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import SpecError, UnresolvedReference
from .naming import camel_case
from .type_converter import FLOW, TYPESCRIPT
from .view_model import Parameter, ParameterLocation, ResponseInfo

logger = logging.getLogger(__name__)


def _is_excluded(parameter: dict[str, Any]) -> bool:
    """Parameters hidden from bindings, or headers injected by proxies/app servers."""
    return parameter.get("x-exclude-from-bindings") is True or bool(parameter.get("x-proxy-header"))


def resolve_parameter_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Look a parameter $ref up in the document's shared `parameters`."""
    name = ref.split("/")[-1]
    parameter = (spec.get("parameters") or {}).get(name)
    if parameter is None:
        raise UnresolvedReference(ref)
    logger.debug("Resolved parameter reference %s", ref)
    return parameter


def _location(parameter: dict[str, Any]) -> ParameterLocation:
    try:
        return ParameterLocation.from_swagger(parameter.get("in", ""))
    except ValueError:
        raise SpecError(
            f"Parameter {parameter.get('name')!r} has unsupported location {parameter.get('in')!r}"
        ) from None


def _parse_parameter(spec: dict[str, Any], raw: dict[str, Any]) -> Parameter:
    location = _location(raw)
    enum = raw.get("enum")
    is_singleton = isinstance(enum, list) and len(enum) == 1

    pattern = raw.get("x-name-pattern") if location is ParameterLocation.QUERY else None

    declared_type = raw.get("type")
    if declared_type == "integer":
        declared_type = "number"

    return Parameter(
        name=raw["name"],
        camel_case_name=camel_case(raw["name"]),
        location=location,
        required=bool(raw.get("required", False)),
        ts_type=TYPESCRIPT.convert_type(raw, spec),
        flow_type=FLOW.convert_type(raw, spec),
        type=declared_type,
        description=raw.get("description", ""),
        is_singleton=is_singleton,
        singleton=enum[0] if is_singleton else None,
        is_pattern_type=bool(pattern),
        pattern=pattern or None,
    )


def parse_parameters(
    raw_parameters: list[dict[str, Any]] | None,
    path_parameters: list[dict[str, Any]] | None,
    spec: dict[str, Any],
) -> list[Parameter]:
    """Parse an operation's parameters followed by its path-level ones."""
    params: list[Parameter] = []

    for raw in [*(raw_parameters or []), *(path_parameters or [])]:
        if _is_excluded(raw):
            logger.debug("Dropping excluded parameter %r", raw.get("name", raw.get("$ref")))
            continue
        if isinstance(raw.get("$ref"), str):
            raw = resolve_parameter_ref(spec, raw["$ref"])
            if _is_excluded(raw):
                logger.debug("Dropping excluded parameter %r", raw.get("name"))
                continue
        params.append(_parse_parameter(spec, raw))

    return params


def get_response_type(operation: dict[str, Any], spec: dict[str, Any] | None = None) -> ResponseInfo:
    """Determine the success response of an operation.

    Every 2xx entry is folded in declaration order; the last one wins, with
    either its schema type or its description.
    """
    response = ResponseInfo()
    for status, entry in (operation.get("responses") or {}).items():
        if not str(status).startswith("2"):
            continue
        entry = entry or {}
        if entry.get("schema"):
            response = ResponseInfo(
                ts_type=TYPESCRIPT.convert_type(entry["schema"], spec),
                flow_type=FLOW.convert_type(entry["schema"], spec),
            )
        else:
            response = ResponseInfo(description=entry.get("description", ""))
    return response
