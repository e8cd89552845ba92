"""Work out which auth schemes an operation needs.

Document-level `security` and operation-level `security` are merged entry by
entry (operation keys win), the referenced scheme names are looked up in
`securityDefinitions`, and the scheme types found there set the flags.
"""

from __future__ import annotations

from typing import Any

from .view_model import SecurityFlags


def merge_requirements(
    document: list[dict[str, Any]],
    operation: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Merge two security requirement lists index by index."""
    merged = []
    for i in range(max(len(document), len(operation))):
        entry: dict[str, Any] = {}
        if i < len(document):
            entry.update(document[i])
        if i < len(operation):
            entry.update(operation[i])
        merged.append(entry)
    return merged


def resolve_security(spec: dict[str, Any], operation: dict[str, Any]) -> SecurityFlags:
    is_secure = "security" in spec or "security" in operation
    definitions = spec.get("securityDefinitions")

    scheme_types: set[str] = set()
    if definitions is not None or "security" in operation:
        merged = merge_requirements(spec.get("security") or [], operation.get("security") or [])
        referenced = {name for requirement in merged for name in requirement}
        for scheme_name, scheme in (definitions or {}).items():
            if scheme_name in referenced:
                scheme_types.add(scheme.get("type"))

    return SecurityFlags(
        is_secure=is_secure,
        is_secure_token="oauth2" in scheme_types,
        is_secure_api_key="apiKey" in scheme_types,
        is_secure_basic="basic" in scheme_types,
    )
