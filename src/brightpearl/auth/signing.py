"""
brightpearl.auth.signing

Outbound token signing.

Responsibilities:
- HMAC-SHA256 sign a token with the developer secret (base64 of the raw digest).
- Derive a per-call copy of client settings with eligible tokens signed.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from collections.abc import Mapping
from typing import Any

SIGNED_TOKENS: tuple[str, ...] = ("account_token", "dev_token")


def sign_token(token: str, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), token.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def sign_settings(settings: Mapping[str, Any]) -> dict[str, Any]:
    """
    Copy of `settings` with `account_token` / `dev_token` signed by `dev_secret`.

    Tokens are signed from their raw value on every call; the input mapping is never
    modified, so signing twice cannot happen through the client.
    """

    signed = dict(settings)
    secret = settings.get("dev_secret")
    if secret is None:
        return signed

    for key in SIGNED_TOKENS:
        token = settings.get(key)
        if token is not None:
            signed[key] = sign_token(str(token), str(secret))
    return signed
