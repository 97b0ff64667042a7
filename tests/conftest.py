"""Shared fixtures: sample Swagger 1.2 documents and a fake HTTP server.

The fake server is an httpx.MockTransport serving canned documents by URL,
so loader and codegen tests run without network access.
"""

from __future__ import annotations

import copy
import json
from typing import Any

import httpx
import pytest

ROOT_URL = "http://x/api"

_PETS_INDEX: dict[str, Any] = {
    "apiVersion": "1.0",
    "swaggerVersion": "1.2",
    "basePath": "http://x/api",
    "apis": [{"description": "Pets", "path": "/pets.json"}],
}

_PETS_RESOURCE: dict[str, Any] = {
    "apiVersion": "1.0",
    "swaggerVersion": "1.2",
    "basePath": "http://x/api",
    "resourcePath": "/pets",
    "description": "Operations about pets",
    "models": {
        "Pet": {
            "id": "Pet",
            "required": ["id"],
            "properties": {
                "id": {"type": "integer"},
                "name": {"type": "string"},
            },
        },
    },
    "apis": [
        {
            "path": "/pets/{id}",
            "operations": [
                {
                    "method": "GET",
                    "nickname": "getPet",
                    "summary": "Find pet by ID",
                    "type": "Pet",
                    "parameters": [
                        {
                            "name": "id",
                            "paramType": "path",
                            "required": True,
                            "type": "integer",
                            "description": "ID of pet to fetch",
                        },
                    ],
                },
            ],
        },
    ],
}

_STORE_RESOURCE: dict[str, Any] = {
    "apiVersion": "1.0",
    "basePath": "http://x/api",
    "resourcePath": "/store",
    "models": {
        "Order": {
            "id": "Order",
            "required": ["id", "petId"],
            "properties": {
                "id": {"type": "integer"},
                "petId": {"type": "integer"},
                "status": {"type": "string", "description": "Order status"},
            },
        },
    },
    "apis": [
        {
            "path": "/store/order",
            "operations": [
                {
                    "method": "POST",
                    "nickname": "placeOrder",
                    "type": "Order",
                    "parameters": [
                        {"name": "body", "paramType": "body", "required": True, "type": "Order"},
                    ],
                },
            ],
        },
        {
            "path": "/store/orders",
            "operations": [
                {
                    "method": "GET",
                    "nickname": "listOrders",
                    "type": "array",
                    "items": {"$ref": "Order"},
                    "parameters": [
                        {
                            "name": "status",
                            "paramType": "query",
                            "type": "string",
                            "enum": ["placed", "approved", "delivered"],
                        },
                    ],
                },
            ],
        },
    ],
}


@pytest.fixture
def pets_index() -> dict[str, Any]:
    return copy.deepcopy(_PETS_INDEX)


@pytest.fixture
def pets_resource() -> dict[str, Any]:
    return copy.deepcopy(_PETS_RESOURCE)


@pytest.fixture
def store_resource() -> dict[str, Any]:
    return copy.deepcopy(_STORE_RESOURCE)


class FakeServer:
    """Serves documents by URL and records every request made."""

    def __init__(self) -> None:
        self.routes: dict[str, httpx.Response] = {}
        self.requests: list[str] = []

    def add_json(self, url: str, payload: Any) -> None:
        self.routes[url] = httpx.Response(200, content=json.dumps(payload).encode())

    def add_raw(self, url: str, body: bytes, status_code: int = 200) -> None:
        self.routes[url] = httpx.Response(status_code, content=body)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, content=b"not found")
        return httpx.Response(route.status_code, content=route.content)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self._handle))


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def pets_server(server: FakeServer, pets_index, pets_resource) -> FakeServer:
    """Fake server hosting the single-resource pets listing at ROOT_URL."""
    server.add_json(ROOT_URL, pets_index)
    server.add_json(f"{ROOT_URL}/pets.json", pets_resource)
    return server
