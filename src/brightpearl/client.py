"""
brightpearl.client

Description-driven Brightpearl API client.

Responsibilities:
- Own the mutable client settings (credentials, account, API domain).
- Lazily build the HTTP transport and bind the shared description for the domain.
- Invoke operations by name: merge settings, sign tokens, shape, execute, unwrap.
- Validate inbound callbacks with the configured developer secret.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from brightpearl.auth.callbacks import (
    CallbackValidator,
    InstallCallback,
    OngoingCallback,
    TimestampFactory,
    utc_timestamp,
)
from brightpearl.auth.signing import sign_settings
from brightpearl.description.cache import DescriptionCache, description_cache
from brightpearl.description.models import Description, OperationDef
from brightpearl.description.resources import ResourceLoader, default_loader
from brightpearl.observability.logging import get_logger
from brightpearl.settings import Settings
from brightpearl.transport.http import EventHooks, build_async_client, send, shape_request, unwrap

log = get_logger(__name__)

API_VERSION = "2.0.0"

# Master datacenter, used when no api_domain is configured.
DEFAULT_API_DOMAIN = "ws-eu1.brightpearl.com"

OperationCall = Callable[..., Awaitable[Any]]


class Client:
    """
    Async client whose operations come from a declarative service description.

    Settings are merged on update and never overwritten by signing; the description is
    shared through a `DescriptionCache` and rebound when `api_domain` changes.
    """

    def __init__(
        self,
        settings: Mapping[str, Any] | None = None,
        *,
        http: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        event_hooks: EventHooks | None = None,
        loader: ResourceLoader = default_loader,
        cache: DescriptionCache = description_cache,
        timestamp_factory: TimestampFactory = utc_timestamp,
    ) -> None:
        self._settings: dict[str, Any] = dict(settings or {})
        self._http = http
        self._owns_http = http is None
        self._transport = transport
        self._event_hooks = event_hooks
        self._loader = loader
        self._cache = cache
        self._timestamp_factory = timestamp_factory
        self._description: Description | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> Client:
        return cls(settings.client_settings(), **kwargs)

    @property
    def settings(self) -> dict[str, Any]:
        return dict(self._settings)

    @property
    def api_domain(self) -> str:
        return self._settings.get("api_domain") or DEFAULT_API_DOMAIN

    @property
    def is_bound(self) -> bool:
        return self._description is not None

    def update_settings(self, patch: Mapping[str, Any]) -> Client:
        previous_domain = self.api_domain
        self._settings.update(patch)

        if "api_domain" in patch and self.api_domain != previous_domain:
            # Rebinding is a full rebuild on the next call; the old description is dropped.
            self._cache.invalidate(self.api_domain)
            self._description = None
            log.info("api_domain_changed", previous=previous_domain, api_domain=self.api_domain)
        return self

    def set_api_domain(self, api_domain: str) -> Client:
        return self.update_settings({"api_domain": api_domain})

    def bind(self) -> Description:
        """
        Ensure the transport exists and the description for the current domain is bound.
        """

        self._ensure_http()
        self._settings.setdefault("api_domain", DEFAULT_API_DOMAIN)
        self._description = self._cache.get(self._loader, self.api_domain)
        return self._description

    def _ensure_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = build_async_client(
                transport=self._transport, event_hooks=self._event_hooks
            )
        return self._http

    def operation_names(self) -> list[str]:
        return sorted(self.bind().operations)

    def operation(self, name: str) -> OperationCall:
        """
        Async callable bound to one operation, e.g. `await client.operation("getContact")(id=5)`.
        """

        op = self.bind().operation(name)

        async def call(params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
            return await self.invoke(op.name, {**(params or {}), **kwargs})

        call.__name__ = op.name
        call.__doc__ = op.summary or None
        return call

    def parameters_for(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        # Version from the client constant wins over settings; call-site values win over both.
        composed = {**self._settings, "apiVersion": API_VERSION}
        composed = sign_settings(composed)
        composed.update(params or {})
        return composed

    async def invoke(self, operation: str, params: Mapping[str, Any] | None = None) -> Any:
        description = self.bind()
        op: OperationDef = description.operation(operation)

        shaped = shape_request(description, op, self.parameters_for(params))
        log.info("operation_invoked", operation=op.name, method=shaped.method, url=shaped.url)

        payload = await send(self._ensure_http(), shaped)
        return unwrap(payload)

    def callback_validator(self) -> CallbackValidator:
        return CallbackValidator(
            self._settings.get("dev_secret") or "",
            timestamp_factory=self._timestamp_factory,
        )

    def install_callback(
        self, query: Mapping[str, Any], signature: str | None = None
    ) -> InstallCallback:
        return self.callback_validator().install(query, signature)

    def simple_callback(
        self, query: Mapping[str, Any], signature: str | None = None
    ) -> OngoingCallback:
        return self.callback_validator().ongoing(query, signature)

    async def aclose(self) -> None:
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


# --- Module Notes -----------------------------------------------------------
# Calls are not synchronized against `update_settings`; share a Client across tasks
# only when settings are fixed. The description cache itself is thread-safe.
