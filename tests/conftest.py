"""
tests.conftest

Shared fixtures.

Responsibilities:
- Reset the process-wide description cache around every test.
- Provide a small in-memory service description and a recording mock transport.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from brightpearl.description.cache import description_cache
from brightpearl.description.resources import MappingResourceLoader


@pytest.fixture(autouse=True)
def _reset_description_cache():
    description_cache.reset()
    yield
    description_cache.reset()


def make_resources() -> dict[str, Any]:
    return {
        "service-config": {
            "name": "Brightpearl",
            "services": ["contact-service", "order-service"],
        },
        "contact-service": {
            "operations": {
                "getContact": {
                    "httpMethod": "GET",
                    "uriTemplate": "/{apiVersion}/{account_code}/contact-service/contact/{id}",
                    "parameters": {"id": {"type": "array", "location": "uri", "required": True}},
                },
                "searchContacts": {
                    "httpMethod": "GET",
                    "uriTemplate": "/{apiVersion}/{account_code}/contact-service/contact-search",
                    "parameters": {
                        "primaryEmail": {"type": "string", "location": "query"},
                        "pageSize": {"type": "integer", "location": "query", "default": 200},
                    },
                },
                "createContact": {
                    "httpMethod": "POST",
                    "uriTemplate": "/{apiVersion}/{account_code}/contact-service/contact",
                    "parameters": {
                        "lastName": {"type": "string", "location": "json", "required": True},
                        "firstName": {"type": "string", "location": "json"},
                    },
                },
            },
            "models": {"Contact": {"type": "object"}},
        },
        "order-service": {
            "operations": {
                "getOrder": {
                    "httpMethod": "GET",
                    "uriTemplate": "/{apiVersion}/{account_code}/order-service/order/{id}",
                    "parameters": {"id": {"type": "integer", "location": "uri", "required": True}},
                },
                # Same name as contact-service's operation: the first listed service wins.
                "getContact": {
                    "httpMethod": "GET",
                    "uriTemplate": "/shadowed",
                },
                "getInstalledApp": {
                    "httpMethod": "GET",
                    "uriTemplate": "/{apiVersion}/{account_code}/integration-service/installed-app",
                    "parameters": {
                        "dev_token": {
                            "type": "string",
                            "location": "header",
                            "sentAs": "brightpearl-dev-token",
                        }
                    },
                },
            },
            "models": {"Contact": {"type": "shadowed"}, "Order": {"type": "object"}},
        },
    }


@pytest.fixture()
def loader() -> MappingResourceLoader:
    return MappingResourceLoader(make_resources())


class RecordingTransport(httpx.MockTransport):
    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)


@pytest.fixture()
def json_transport() -> Callable[[Any, int], RecordingTransport]:
    def factory(payload: Any, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda _: httpx.Response(status_code, json=payload))

    return factory


# --- Module Notes -----------------------------------------------------------
# Fixtures stay network-free: every HTTP exchange goes through httpx.MockTransport.
