"""
brightpearl.auth.callbacks

Inbound callback authentication.

Responsibilities:
- Rebuild the canonical string (secret + sorted `key=value` pairs) and compare its
  SHA-256 hex digest to the supplied signature.
- Decode the two callback shapes (app installation, ongoing) into typed results.
- Convert millisecond callback timestamps into calendar timestamps.

Note:
- The construction is a prefix-keyed hash, not HMAC. It is kept as-is because
  Brightpearl computes signatures this way.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from brightpearl.errors import InvalidCallbackError, UnauthorizedError
from brightpearl.observability.logging import get_logger

log = get_logger(__name__)

INSTALL_FIELDS: tuple[str, ...] = ("accountCode", "timestamp", "token")
ONGOING_FIELDS: tuple[str, ...] = ("accountCode", "timestamp")

TimestampFactory = Callable[[int], datetime]


def utc_timestamp(epoch_seconds: int) -> datetime:
    return datetime.fromtimestamp(epoch_seconds, tz=UTC)


def callback_epoch(timestamp: str | int) -> int:
    # Callbacks carry milliseconds; floor to whole seconds.
    try:
        return int(timestamp) // 1000
    except (TypeError, ValueError) as e:
        raise InvalidCallbackError("callback timestamp is not an integer") from e


def canonical_string(fields: Mapping[str, Any], secret: str) -> str:
    return secret + "".join(f"{key}={fields[key]}" for key in sorted(fields))


def expected_signature(fields: Mapping[str, Any], secret: str) -> str:
    return hashlib.sha256(canonical_string(fields, secret).encode("utf-8")).hexdigest()


def validate_signature(fields: Mapping[str, Any], secret: str, signature: str | None) -> None:
    expected = expected_signature(fields, secret)
    # Constant-time compare; a missing signature takes the same path as a wrong one.
    supplied = (signature or "").encode("utf-8")
    if not hmac.compare_digest(expected.encode("utf-8"), supplied):
        log.warning("callback_signature_mismatch", account_code=fields.get("accountCode"))
        raise UnauthorizedError("callback signature does not match")


@dataclass(frozen=True, slots=True)
class InstallCallback:
    account_code: str
    account_token: str
    timestamp: datetime

    def as_dict(self) -> dict[str, Any]:
        return {
            "account_code": self.account_code,
            "account_token": self.account_token,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True, slots=True)
class OngoingCallback:
    account_code: str
    timestamp: datetime

    def as_dict(self) -> dict[str, Any]:
        return {"account_code": self.account_code, "timestamp": self.timestamp}


class CallbackValidator:
    """
    Validates and decodes callbacks signed with a developer secret.

    The timestamp strategy is fixed at construction time.
    """

    def __init__(self, secret: str, *, timestamp_factory: TimestampFactory = utc_timestamp) -> None:
        if not secret:
            raise UnauthorizedError("no developer secret configured for callback validation")
        self._secret = secret
        self._timestamp_factory = timestamp_factory

    def validate(self, fields: Mapping[str, Any], signature: str | None) -> None:
        validate_signature(fields, self._secret, signature)

    def to_datetime(self, timestamp: str | int) -> datetime:
        return self._timestamp_factory(callback_epoch(timestamp))

    def install(self, query: Mapping[str, Any], signature: str | None) -> InstallCallback:
        fields = _pick(query, INSTALL_FIELDS)
        self.validate(fields, signature)
        return InstallCallback(
            account_code=str(fields["accountCode"]),
            account_token=str(fields["token"]),
            timestamp=self.to_datetime(fields["timestamp"]),
        )

    def ongoing(self, query: Mapping[str, Any], signature: str | None) -> OngoingCallback:
        fields = _pick(query, ONGOING_FIELDS)
        self.validate(fields, signature)
        return OngoingCallback(
            account_code=str(fields["accountCode"]),
            timestamp=self.to_datetime(fields["timestamp"]),
        )


def _pick(query: Mapping[str, Any], names: tuple[str, ...]) -> dict[str, Any]:
    missing = [name for name in names if query.get(name) is None]
    if missing:
        raise InvalidCallbackError(f"callback is missing field(s): {', '.join(missing)}")
    return {name: query[name] for name in names}


# --- Module Notes -----------------------------------------------------------
# Only the fields listed for the callback kind enter the canonical string; extra
# query parameters (including `signature` itself) are ignored.
