"""Convert Swagger parameter and schema objects into dialect type descriptors.

Handles:
- Body parameters (the nested `schema` is converted)
- $ref to definitions
- enum values as unions of JSON literals
- string / number / integer / boolean primitives
- arrays (element type from `items`)
- objects with `properties`, `required` and `allOf` composition

Each converter returns a TypeSpec; str(type_spec) is the type expression in
that converter's dialect (TypeScript or Flow).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any

from .errors import UnresolvedReference
from .loader import get_definitions, ref_name

_ATOMIC_KINDS = {"string", "number", "boolean", "any", "enum"}


@dataclass(frozen=True)
class TypeSpec:
    kind: str
    expression: str
    description: str | None = None
    target: str | None = None
    element_type: TypeSpec | None = None
    properties: tuple[TypeSpec, ...] = field(default_factory=tuple)
    name: str | None = None
    optional: bool = False

    def __str__(self) -> str:
        return self.expression

    @property
    def is_ref(self) -> bool:
        return self.kind == "ref"

    @property
    def is_object(self) -> bool:
        return self.kind == "object"

    @property
    def is_array(self) -> bool:
        return self.kind == "array"

    @property
    def is_enum(self) -> bool:
        return self.kind == "enum"

    @property
    def is_atomic(self) -> bool:
        return self.kind in _ATOMIC_KINDS


def _property_key(name: str) -> str:
    return name if name.isidentifier() else json.dumps(name)


class TypeConverter:
    """Shared Swagger -> type descriptor walk; dialects override the rendering hooks."""

    dialect = ""
    reserved_words: frozenset[str] = frozenset()

    def sanitize_reserved_words(self, name: str) -> str:
        if name in self.reserved_words:
            return name + "Type"
        return name

    def convert_type(self, schema: dict[str, Any], spec: dict[str, Any] | None = None) -> TypeSpec:
        """Return the type descriptor for a parameter or schema object."""
        if "schema" in schema:
            return self.convert_type(schema["schema"], spec)

        description = schema.get("description")
        ref = schema.get("$ref")
        if isinstance(ref, str):
            target = ref_name(ref)
            return TypeSpec("ref", self.ref_expression(target), description, target=target)

        if "enum" in schema:
            literals = [json.dumps(value) for value in schema["enum"]]
            return TypeSpec("enum", " | ".join(literals) or "any", description)

        schema_type = schema.get("type")
        if schema_type == "string":
            return TypeSpec("string", "string", description)
        if schema_type in ("number", "integer"):
            return TypeSpec("number", "number", description)
        if schema_type == "boolean":
            return TypeSpec("boolean", "boolean", description)
        if schema_type == "array":
            element = self.convert_type(schema.get("items") or {}, spec)
            return TypeSpec("array", self.array_expression(element), description, element_type=element)

        # Everything else is treated as an object.
        if "title" in schema and schema.get("minItems", -1) >= 0:
            return TypeSpec("any", "any", description)

        properties: list[TypeSpec] = []
        for member in schema.get("allOf", []):
            if "$ref" in member:
                definitions = get_definitions(spec or {})
                name = ref_name(member["$ref"])
                if name not in definitions:
                    raise UnresolvedReference(member["$ref"])
                member = definitions[name]
            properties.extend(self.convert_type(member, spec).properties)

        required = set(schema.get("required") or [])
        for prop_name, prop_schema in (schema.get("properties") or {}).items():
            prop = self.convert_type(prop_schema, spec)
            properties.append(replace(prop, name=prop_name, optional=prop_name not in required))

        return TypeSpec("object", self.object_expression(properties), description, properties=tuple(properties))

    def ref_expression(self, target: str) -> str:
        return target

    def array_expression(self, element: TypeSpec) -> str:
        raise NotImplementedError

    def object_expression(self, properties: list[TypeSpec]) -> str:
        raise NotImplementedError


class TypeScriptConverter(TypeConverter):
    dialect = "typescript"

    def array_expression(self, element: TypeSpec) -> str:
        if element.is_enum and " | " in element.expression:
            return f"({element})[]"
        return f"{element}[]"

    def object_expression(self, properties: list[TypeSpec]) -> str:
        if not properties:
            return "{}"
        members = "; ".join(
            f"{_property_key(p.name or '')}{'?' if p.optional else ''}: {p}" for p in properties
        )
        return "{ " + members + " }"


class FlowConverter(TypeConverter):
    dialect = "flow"
    # Built-in Flow/JavaScript type names a definition must not shadow.
    reserved_words = frozenset({
        "Array", "ArrayBuffer", "Boolean", "Buffer", "Class", "DataView", "Date", "Error",
        "Function", "Iterable", "Iterator", "Map", "Number", "Object", "Promise", "Proxy",
        "RegExp", "Set", "String", "Symbol", "WeakMap", "WeakSet", "any", "boolean", "empty",
        "mixed", "number", "string", "void",
    })

    def ref_expression(self, target: str) -> str:
        return self.sanitize_reserved_words(target)

    def array_expression(self, element: TypeSpec) -> str:
        return f"Array<{element}>"

    def object_expression(self, properties: list[TypeSpec]) -> str:
        if not properties:
            return "{||}"
        members = ", ".join(
            f"{_property_key(p.name or '')}{'?' if p.optional else ''}: {p}" for p in properties
        )
        return "{| " + members + " |}"


TYPESCRIPT = TypeScriptConverter()
FLOW = FlowConverter()
