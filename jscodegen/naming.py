"""Convert Swagger operations to client method names.

An explicit operationId wins and is only normalized:
  list.Items            -> list_Items
  get-user {id}         -> get_user__id_

Otherwise the name is derived from HTTP verb + path:
  GET    /                    -> get
  GET    /users               -> getUsers
  GET    /users/{id}          -> getUsersById
  GET    /users/{id}/orders   -> getUsersByIdOrders
  DELETE /users/{userId}/     -> deleteUsersByUserId

Names are made unique per view model by appending _1, _2, ...
"""

from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_OPERATION_ID_CHARS = re.compile(r"[.\-{}\s]")

# Words: acronyms followed by a capitalized word, capitalized/lower words,
# remaining upper-case runs, and digit runs.
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def normalize_name(operation_id: str) -> str:
    """Replace characters that cannot appear in an identifier with '_'."""
    return _OPERATION_ID_CHARS.sub("_", operation_id)


def _words(text: str) -> list[str]:
    return _WORD.findall(text)


def camel_case(text: str) -> str:
    """Camel-case a string: 'pet-store_id' -> 'petStoreId', 'byId' -> 'byId'."""
    words = _words(text)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word.capitalize() for word in tail)


def _segment_to_word(segment: str) -> str:
    """Rewrite a templated segment: '{id}' -> 'byId'."""
    if len(segment) > 2 and segment[0] == "{" and segment[-1] == "}":
        return "by" + segment[1].upper() + segment[2:-1]
    return segment


def path_to_method_name(verb: str, path: str) -> str:
    """Derive a method name from HTTP verb + path."""
    verb = verb.lower()
    if path in ("/", ""):
        return verb

    clean_path = path[:-1] if path.endswith("/") else path
    segments = [_segment_to_word(s) for s in clean_path.split("/")[1:]]
    result = camel_case("-".join(segments))
    if not result:
        return verb
    return verb + result[0].upper() + result[1:]


def build_method_name(operation: dict[str, Any], verb: str, path: str) -> str:
    """Pick the candidate name for an operation, before uniqueness is applied."""
    operation_id = operation.get("operationId")
    if operation_id:
        return normalize_name(str(operation_id))
    return path_to_method_name(verb, path)


def unique_name(name: str, seen: set[str]) -> str:
    """Return `name`, or the first unused `name_N`, and record it in `seen`."""
    if name in seen:
        i = 1
        while f"{name}_{i}" in seen:
            i += 1
        logger.debug("Method name %r already taken, using %r", name, f"{name}_{i}")
        name = f"{name}_{i}"
    seen.add(name)
    return name
