"""
brightpearl.api.routers.callbacks

Brightpearl callback endpoints.

Responsibilities:
- `/callbacks/install`: app installation; returns the account code and account token.
- `/callbacks/ongoing`: later callbacks; returns the account code.

Both endpoints only answer after the signature has been validated by a dependency.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from brightpearl.api.deps import install_callback_dep, simple_callback_dep
from brightpearl.auth.callbacks import InstallCallback, OngoingCallback
from brightpearl.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/callbacks", tags=["callbacks"])


class InstallCallbackResponse(BaseModel):
    account_code: str
    account_token: str
    timestamp: datetime


class OngoingCallbackResponse(BaseModel):
    account_code: str
    timestamp: datetime


@router.get("/install", response_model=InstallCallbackResponse)
async def install(
    callback: InstallCallback = Depends(install_callback_dep),
) -> InstallCallbackResponse:
    log.info("install_callback_accepted", account_code=callback.account_code)
    return InstallCallbackResponse(**callback.as_dict())


@router.get("/ongoing", response_model=OngoingCallbackResponse)
async def ongoing(
    callback: OngoingCallback = Depends(simple_callback_dep),
) -> OngoingCallbackResponse:
    log.info("ongoing_callback_accepted", account_code=callback.account_code)
    return OngoingCallbackResponse(**callback.as_dict())


# --- Module Notes -----------------------------------------------------------
# Persisting the account token is the host application's concern; mount this router
# in your own app (or subclass the endpoints) to store it.
