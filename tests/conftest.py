"""Shared fixtures: petstore documents in Swagger 2 and OpenAPI 3 form.

Each fixture returns a fresh copy so tests can mutate the document freely.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


_SWAGGER_PETSTORE: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Swagger Petstore", "version": "1.0.0"},
    "host": "petstore.swagger.io",
    "basePath": "/v2",
    "consumes": ["application/json"],
    "produces": ["application/json"],
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "summary": "List all pets",
                "parameters": [
                    {
                        "name": "limit",
                        "in": "query",
                        "type": "integer",
                        "description": "How many <b>items</b> to return",
                    },
                ],
            },
            "post": {
                "summary": "Create a pet",
                "consumes": ["application/xml", "application/json"],
                "parameters": [{"$ref": "#/parameters/PetBody"}],
            },
        },
        "/pets/{petId}": {
            "parameters": [
                {"name": "petId", "in": "path", "required": True, "type": "string"},
            ],
            "get": {
                "operationId": "showPetById",
                "produces": ["application/xml"],
            },
            "delete": {},
        },
    },
    "parameters": {
        "PetBody": {
            "name": "body",
            "in": "body",
            "required": True,
            "schema": {"$ref": "#/definitions/Pet"},
        },
    },
    "definitions": {"Pet": {"type": "object"}},
}


_OPENAPI_PETSTORE: dict[str, Any] = {
    "openapi": "3.0.0",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "servers": [{"url": "http://petstore.swagger.io/v1"}],
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "parameters": [
                    {
                        "name": "limit",
                        "in": "query",
                        "required": False,
                        "schema": {"type": "integer", "format": "int32"},
                    },
                ],
                "responses": {
                    "200": {"description": "ok", "content": {"application/json": {}}},
                    "default": {
                        "description": "error",
                        "content": {"application/json": {}, "text/plain": {}},
                    },
                },
            },
            "post": {
                "requestBody": {
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/Pet"},
                        },
                    },
                },
                "responses": {"201": {"description": "Null response"}},
            },
        },
    },
    "components": {"schemas": {"Pet": {"type": "object"}}},
}


@pytest.fixture
def swagger_spec() -> dict[str, Any]:
    return copy.deepcopy(_SWAGGER_PETSTORE)


@pytest.fixture
def openapi_spec() -> dict[str, Any]:
    return copy.deepcopy(_OPENAPI_PETSTORE)


@pytest.fixture
def minimal_spec() -> dict[str, Any]:
    """GET /pets with an operationId, POST /pets without one."""
    return {
        "info": {"title": "Pets"},
        "basePath": "/api",
        "paths": {
            "/pets": {
                "get": {"operationId": "listPets"},
                "post": {},
            },
        },
    }
