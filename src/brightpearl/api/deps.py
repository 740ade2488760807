"""
brightpearl.api.deps

FastAPI dependency functions for callback authentication.

Responsibilities:
- Build a `CallbackValidator` from settings.
- Convert signed callback query parameters into typed callback results.
- Map authentication failures to HTTP 401 without echoing signatures.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request
from starlette.status import HTTP_401_UNAUTHORIZED

from brightpearl.auth.callbacks import CallbackValidator, InstallCallback, OngoingCallback
from brightpearl.errors import InvalidCallbackError, UnauthorizedError
from brightpearl.settings import Settings, get_settings


def settings_dep() -> Settings:
    return get_settings()


def callback_validator(settings: Settings = Depends(settings_dep)) -> CallbackValidator:
    try:
        return CallbackValidator(settings.dev_secret)
    except UnauthorizedError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Unauthorized") from e


def install_callback_dep(
    request: Request,
    validator: CallbackValidator = Depends(callback_validator),
) -> InstallCallback:
    query = request.query_params
    try:
        return validator.install(query, query.get("signature"))
    except InvalidCallbackError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=str(e)) from e
    except UnauthorizedError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Unauthorized") from e


def simple_callback_dep(
    request: Request,
    validator: CallbackValidator = Depends(callback_validator),
) -> OngoingCallback:
    query = request.query_params
    try:
        return validator.ongoing(query, query.get("signature"))
    except InvalidCallbackError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=str(e)) from e
    except UnauthorizedError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Unauthorized") from e


# --- Module Notes -----------------------------------------------------------
# Signature mismatches share one generic detail; only structural problems (missing
# fields, bad timestamps) are described to the caller.
