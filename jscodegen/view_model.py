"""Dialect-neutral view model handed to the templates."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from .type_converter import TypeSpec


class ParameterLocation(str, Enum):
    BODY = "body"
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    FORM = "form"

    @classmethod
    def from_swagger(cls, value: str) -> ParameterLocation:
        """Map a Swagger `in` value ('formData' is the form location)."""
        if value == "formData":
            return cls.FORM
        return cls(value)


@dataclass(frozen=True)
class SecurityFlags:
    is_secure: bool = False
    is_secure_token: bool = False
    is_secure_api_key: bool = False
    is_secure_basic: bool = False


@dataclass(frozen=True)
class ResponseInfo:
    """Success response of a method: a type, a description, or neither."""

    ts_type: TypeSpec | None = None
    flow_type: TypeSpec | None = None
    description: str | None = None

    @property
    def is_inline_type(self) -> bool:
        return self.ts_type is not None


@dataclass
class Parameter:
    name: str
    camel_case_name: str
    location: ParameterLocation
    required: bool
    ts_type: TypeSpec
    flow_type: TypeSpec
    type: str | None = None
    description: str = ""
    is_singleton: bool = False
    singleton: Any = None
    is_pattern_type: bool = False
    pattern: str | None = None

    @property
    def cardinality(self) -> str:
        return "" if self.required else "?"

    @property
    def is_body_parameter(self) -> bool:
        return self.location is ParameterLocation.BODY

    @property
    def is_path_parameter(self) -> bool:
        return self.location is ParameterLocation.PATH

    @property
    def is_query_parameter(self) -> bool:
        return self.location is ParameterLocation.QUERY

    @property
    def is_header_parameter(self) -> bool:
        return self.location is ParameterLocation.HEADER

    @property
    def is_form_parameter(self) -> bool:
        return self.location is ParameterLocation.FORM


@dataclass(frozen=True)
class Header:
    name: str
    value: str


@dataclass
class Method:
    path: str
    http_verb: str
    method_name: str
    summary: str | None
    security: SecurityFlags
    response: ResponseInfo
    parameters: list[Parameter] = field(default_factory=list)
    headers: list[Header] = field(default_factory=list)
    class_name: str | None = None
    external_docs: dict[str, Any] | None = None

    @property
    def is_get(self) -> bool:
        return self.http_verb == "GET"

    @property
    def is_post(self) -> bool:
        return self.http_verb == "POST"

    @property
    def is_secure(self) -> bool:
        return self.security.is_secure

    @property
    def is_secure_token(self) -> bool:
        return self.security.is_secure_token

    @property
    def is_secure_api_key(self) -> bool:
        return self.security.is_secure_api_key

    @property
    def is_secure_basic(self) -> bool:
        return self.security.is_secure_basic

    @property
    def has_parameters(self) -> bool:
        return bool(self.parameters)

    @property
    def has_required_parameters(self) -> bool:
        return any(p.required for p in self.parameters)

    @property
    def is_inline_type(self) -> bool:
        return self.response.is_inline_type

    @property
    def response_type(self) -> TypeSpec | None:
        return self.response.ts_type

    @property
    def response_description(self) -> str | None:
        return self.response.description

    @property
    def method_ts_type(self) -> TypeSpec | None:
        return self.response.ts_type

    @property
    def method_flow_type(self) -> TypeSpec | None:
        return self.response.flow_type


@dataclass(frozen=True)
class Definition:
    name: str
    ts_type: TypeSpec
    flow_type: TypeSpec
    description: str | None = None


@dataclass
class ViewModel:
    title: str
    version: str
    domain: str
    is_secure: bool
    methods: list[Method] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)
    is_secure_token: bool = False
    is_secure_api_key: bool = False
    is_secure_basic: bool = False
    class_name: str | None = None
    module_name: str | None = None
    imports: list[str] = field(default_factory=list)
    is_es6: bool = False

    @property
    def method_names(self) -> list[str]:
        return [m.method_name for m in self.methods]

    def add_method(self, method: Method) -> None:
        """Append a method; its auth flags can only raise the document-level ones."""
        self.methods.append(method)
        if method.is_secure:
            self.is_secure_token = self.is_secure_token or method.is_secure_token
            self.is_secure_api_key = self.is_secure_api_key or method.is_secure_api_key
            self.is_secure_basic = self.is_secure_basic or method.is_secure_basic

    def to_context(self) -> dict[str, Any]:
        """Top-level template context (nested values stay objects)."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
