"""
brightpearl.transport.http

Request shaping and execution over `httpx`.

Responsibilities:
- Build the shared `httpx.AsyncClient` with Brightpearl defaults.
- Place each operation parameter at its declared location (uri/header/query/json).
- Execute requests and decode JSON bodies; map httpx failures to `TransportError`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx

from brightpearl.description.models import Description, OperationDef
from brightpearl.description.parameters import ParameterDef
from brightpearl.errors import MissingRequiredParameterError, TransportError
from brightpearl.observability.logging import get_logger

log = get_logger(__name__)

_URI_VAR = re.compile(r"\{([^{}]+)\}")

EventHooks = Mapping[str, list[Callable[..., Any]]]


def build_async_client(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    event_hooks: EventHooks | None = None,
    timeout: httpx.Timeout | float | None = None,
) -> httpx.AsyncClient:
    # No timeout unless the caller asks for one; retries/backoff belong to the transport.
    return httpx.AsyncClient(
        transport=transport,
        event_hooks=dict(event_hooks or {}),
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )


def format_value(param: ParameterDef, value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if param.type == "array" and isinstance(value, list | tuple | set):
        return ",".join(str(v) for v in value)
    return value


@dataclass(frozen=True, slots=True)
class ShapedRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | None = None


def shape_request(
    description: Description,
    operation: OperationDef,
    params: Mapping[str, Any],
) -> ShapedRequest:
    uri_values: dict[str, str] = {}
    headers: dict[str, str] = {}
    query: dict[str, Any] = {}
    body: dict[str, Any] = {}

    for name, param in operation.parameters.items():
        value = params.get(name, param.default)
        if value is None:
            if param.required:
                raise MissingRequiredParameterError(operation.name, name)
            continue

        if param.location == "json":
            body[param.sent_as] = value
            continue

        formatted = format_value(param, value)
        if param.location == "uri":
            uri_values[param.sent_as] = quote(str(formatted), safe=",-")
        elif param.location == "header":
            headers[param.sent_as] = str(formatted)
        else:
            query[param.sent_as] = formatted

    # Unset optional URI variables expand to nothing.
    path = _URI_VAR.sub(lambda m: uri_values.get(m.group(1), ""), operation.uri_template)
    url = description.base_url.rstrip("/") + "/" + path.lstrip("/")

    return ShapedRequest(
        method=operation.http_method,
        url=url,
        headers=headers,
        query=query,
        body=body or None,
    )


async def send(http: httpx.AsyncClient, shaped: ShapedRequest) -> Any:
    # build_request merges the client defaults (Accept header, event hooks apply on send).
    request = http.build_request(
        shaped.method,
        shaped.url,
        params=shaped.query or None,
        headers=shaped.headers,
        json=shaped.body,
    )
    try:
        response = await http.send(request)
    except httpx.HTTPError as e:
        log.warning("transport_failed", method=request.method, url=str(request.url), error=str(e))
        raise TransportError(f"{request.method} {request.url} failed: {e}") from e

    log.info(
        "operation_response",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
    )

    payload = decode(response)
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"{request.method} {request.url} returned HTTP {response.status_code}",
            status_code=response.status_code,
            response=payload,
        ) from e
    return payload


def decode(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def unwrap(payload: Any) -> Any:
    """
    Return the bare `response` of an envelope unless it carries `reference` metadata.
    """

    if (
        isinstance(payload, Mapping)
        and payload.get("response") is not None
        and payload.get("reference") is None
    ):
        return payload["response"]
    return payload


# --- Module Notes -----------------------------------------------------------
# Call parameters not declared by the operation are ignored; the description is the
# only source of request shape.
