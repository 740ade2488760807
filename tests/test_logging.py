"""
tests.test_logging

Log redaction of credentials.
"""

from __future__ import annotations

from brightpearl.observability.logging import REDACTED, redact_sensitive


def test_redacts_credentials_only() -> None:
    event = {
        "event": "operation_invoked",
        "account_token": "raw",
        "signature": "abc",
        "staff_token": None,
        "account_code": "acme",
    }

    redacted = redact_sensitive(None, "info", event)

    assert redacted["account_token"] == REDACTED
    assert redacted["signature"] == REDACTED
    assert redacted["staff_token"] is None
    assert redacted["account_code"] == "acme"


# --- Module Notes -----------------------------------------------------------
# Redaction is tested on the processor directly; output format is structlog's concern.
