"""Shared Swagger 2.0 documents for the generator tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

MINIMAL_SPEC: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Minimal", "version": "1.0"},
    "paths": {
        "/ping": {
            "get": {
                "responses": {"200": {"description": "pong"}},
            },
        },
    },
}

PETSTORE_SPEC: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "host": "petstore.example.com",
    "basePath": "/v1/",
    "schemes": ["https", "http"],
    "produces": ["application/json"],
    "consumes": ["application/json"],
    "securityDefinitions": {
        "petstore_auth": {
            "type": "oauth2",
            "flow": "implicit",
            "authorizationUrl": "https://petstore.example.com/oauth/dialog",
            "scopes": {"write:pets": "modify pets"},
        },
        "api_key": {"type": "apiKey", "name": "api_key", "in": "header"},
        "basic_auth": {"type": "basic"},
    },
    "parameters": {
        "limitParam": {"name": "limit", "in": "query", "type": "integer", "required": False},
    },
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "summary": "List pets",
                "parameters": [
                    {"$ref": "#/parameters/limitParam"},
                    {"name": "status", "in": "query", "type": "string", "enum": ["available"]},
                ],
                "responses": {
                    "200": {
                        "description": "A list of pets",
                        "schema": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
                    },
                },
                "security": [{"api_key": []}],
            },
            "post": {
                "operationId": "createPet",
                "description": "Create a pet",
                "parameters": [
                    {"name": "body", "in": "body", "required": True, "schema": {"$ref": "#/definitions/Pet"}},
                ],
                "responses": {"201": {"description": "Created"}},
                "security": [{"petstore_auth": ["write:pets"]}],
            },
        },
        "/pets/{petId}": {
            "parameters": [
                {"name": "petId", "in": "path", "required": True, "type": "integer"},
            ],
            "get": {
                "summary": "Find pet by ID",
                "responses": {
                    "200": {"description": "A pet", "schema": {"$ref": "#/definitions/Pet"}},
                    "404": {"description": "Not found"},
                },
            },
            "delete": {
                "parameters": [
                    {"name": "X-Forwarded-For", "in": "header", "type": "string", "x-proxy-header": True},
                ],
                "responses": {"204": {"description": "Deleted"}},
            },
            "x-internal": {"owner": "pets-team"},
        },
    },
    "definitions": {
        "Pet": {
            "type": "object",
            "required": ["id", "name"],
            "properties": {
                "id": {"type": "integer"},
                "name": {"type": "string"},
                "tag": {"type": "string"},
            },
        },
        "Error": {
            "description": "An error",
            "type": "object",
            "properties": {
                "code": {"type": "integer"},
                "message": {"type": "string"},
            },
        },
    },
}


# ---------------------------------------------------------------------------
# Fixtures: fresh copies so tests can check the input is left untouched
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_spec() -> dict[str, Any]:
    return copy.deepcopy(MINIMAL_SPEC)


@pytest.fixture
def petstore_spec() -> dict[str, Any]:
    return copy.deepcopy(PETSTORE_SPEC)
