"""
tests.test_callbacks

Callback signature validation and timestamp conversion.
"""

from __future__ import annotations

import hashlib
from datetime import UTC, datetime

import pytest

from brightpearl.auth.callbacks import (
    CallbackValidator,
    callback_epoch,
    canonical_string,
    expected_signature,
    utc_timestamp,
    validate_signature,
)
from brightpearl.errors import InvalidCallbackError, UnauthorizedError

SECRET = "s3cret"
FIELDS = {"token": "tok", "timestamp": "1700000000000", "accountCode": "abc123"}
SIGNATURE = hashlib.sha256(
    b"s3cret" + b"accountCode=abc123" + b"timestamp=1700000000000" + b"token=tok"
).hexdigest()


def _mutations(signature: str):
    for i, ch in enumerate(signature):
        replacement = "0" if ch != "0" else "1"
        yield signature[:i] + replacement + signature[i + 1 :]


def test_canonical_string_sorts_field_names() -> None:
    assert canonical_string(FIELDS, SECRET) == (
        "s3cretaccountCode=abc123timestamp=1700000000000token=tok"
    )
    assert expected_signature(FIELDS, SECRET) == SIGNATURE


def test_validate_accepts_exact_signature() -> None:
    validate_signature(FIELDS, SECRET, SIGNATURE)


def test_validate_rejects_every_single_character_mutation() -> None:
    for mutated in _mutations(SIGNATURE):
        with pytest.raises(UnauthorizedError):
            validate_signature(FIELDS, SECRET, mutated)


@pytest.mark.parametrize("signature", [None, "", SIGNATURE.upper(), SIGNATURE + "0"])
def test_validate_rejects_malformed_signatures(signature) -> None:
    with pytest.raises(UnauthorizedError) as exc:
        validate_signature(FIELDS, SECRET, signature)
    assert SIGNATURE not in str(exc.value)


def test_timestamp_conversion() -> None:
    assert callback_epoch("1700000000000") == 1700000000
    assert callback_epoch(999) == 0
    assert utc_timestamp(1700000000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


def test_non_numeric_timestamp() -> None:
    with pytest.raises(InvalidCallbackError):
        callback_epoch("yesterday")


def test_install_callback() -> None:
    validator = CallbackValidator(SECRET)

    result = validator.install({**FIELDS, "signature": "ignored"}, SIGNATURE)

    assert result.as_dict() == {
        "account_code": "abc123",
        "account_token": "tok",
        "timestamp": datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC),
    }


def test_ongoing_callback_signs_only_account_and_timestamp() -> None:
    fields = {"accountCode": "abc123", "timestamp": "1700000000000"}
    signature = hashlib.sha256(
        b"s3cretaccountCode=abc123timestamp=1700000000000"
    ).hexdigest()
    validator = CallbackValidator(SECRET)

    result = validator.ongoing({**fields, "token": "extra"}, signature)

    assert result.account_code == "abc123"
    assert result.timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


def test_install_callback_rejects_wrong_signature() -> None:
    with pytest.raises(UnauthorizedError):
        CallbackValidator(SECRET).install(FIELDS, "0" * 64)


def test_install_callback_missing_field() -> None:
    with pytest.raises(InvalidCallbackError, match="token"):
        CallbackValidator(SECRET).install({"accountCode": "abc123", "timestamp": "1"}, SIGNATURE)


def test_validator_requires_secret() -> None:
    with pytest.raises(UnauthorizedError):
        CallbackValidator("")


def test_custom_timestamp_factory() -> None:
    def naive(epoch: int) -> datetime:
        return datetime.fromtimestamp(epoch, UTC).replace(tzinfo=None)

    validator = CallbackValidator(SECRET, timestamp_factory=naive)

    assert validator.to_datetime("1700000000999") == datetime(2023, 11, 14, 22, 13, 20)


# --- Module Notes -----------------------------------------------------------
# Signatures are computed inline with hashlib so the expected values stay auditable.
