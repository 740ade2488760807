"""
brightpearl.description.parameters

Parameter definitions and the global parameter catalog.

Responsibilities:
- Define the immutable `ParameterDef` shape and parse it from resource data.
- Provide the parameters every operation accepts (API version, account, auth).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal, get_args

from brightpearl.errors import DescriptionFormatError

Location = Literal["uri", "header", "query", "json"]
LOCATIONS: tuple[str, ...] = get_args(Location)


@dataclass(frozen=True, slots=True)
class ParameterDef:
    name: str
    type: str = "string"
    location: Location = "uri"
    required: bool = False
    # Name on the wire (header name, query key, JSON key); defaults to `name`.
    wire_name: str | None = None
    default: Any = None

    @property
    def sent_as(self) -> str:
        return self.wire_name or self.name

    @classmethod
    def from_resource(cls, name: str, raw: Any) -> ParameterDef:
        if not isinstance(raw, Mapping):
            raise DescriptionFormatError(f"parameter {name!r} must be a mapping")
        location = raw.get("location", "uri")
        if location not in LOCATIONS:
            raise DescriptionFormatError(
                f"parameter {name!r} has unsupported location {location!r}"
            )
        return cls(
            name=name,
            type=str(raw.get("type", "string")),
            location=location,
            required=bool(raw.get("required", False)),
            wire_name=raw.get("sentAs"),
            default=raw.get("default"),
        )


GLOBAL_PARAMETERS: Mapping[str, ParameterDef] = MappingProxyType(
    {
        "apiVersion": ParameterDef(name="apiVersion", location="uri", required=True),
        "account_code": ParameterDef(name="account_code", location="uri", required=True),
        "dev_reference": ParameterDef(
            name="dev_reference", location="header", wire_name="brightpearl-dev-ref"
        ),
        "app_reference": ParameterDef(
            name="app_reference", location="header", wire_name="brightpearl-app-ref"
        ),
        "account_token": ParameterDef(
            name="account_token", location="header", wire_name="brightpearl-account-token"
        ),
        "staff_token": ParameterDef(
            name="staff_token", location="header", wire_name="brightpearl-staff-token"
        ),
    }
)


def with_global_parameters(own: Mapping[str, ParameterDef]) -> dict[str, ParameterDef]:
    """
    Operation parameters extended with the global catalog.

    Operation-declared definitions win over same-named globals.
    """

    merged = dict(own)
    for name, param in GLOBAL_PARAMETERS.items():
        merged.setdefault(name, param)
    return merged


# --- Module Notes -----------------------------------------------------------
# `dev_token` is signed by the client but has no global definition, so it is only
# sent by operations that declare it themselves.
