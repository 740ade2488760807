"""
brightpearl.description.models

Immutable description data model.

Responsibilities:
- Define `OperationDef` (one remote call) and `Description` (the merged registry).
- Parse operations from resource data, failing with `DescriptionFormatError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from brightpearl.description.parameters import ParameterDef, with_global_parameters
from brightpearl.errors import DescriptionFormatError, UnknownOperationError


def _empty() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class OperationDef:
    name: str
    http_method: str
    uri_template: str
    parameters: Mapping[str, ParameterDef] = field(default_factory=_empty)
    summary: str = ""

    @classmethod
    def from_resource(cls, name: str, raw: Any) -> OperationDef:
        if not isinstance(raw, Mapping):
            raise DescriptionFormatError(f"operation {name!r} must be a mapping")

        method = raw.get("httpMethod")
        uri = raw.get("uriTemplate")
        if not isinstance(method, str) or not isinstance(uri, str):
            raise DescriptionFormatError(
                f"operation {name!r} requires string 'httpMethod' and 'uriTemplate'"
            )

        raw_params = raw.get("parameters") or {}
        if not isinstance(raw_params, Mapping):
            raise DescriptionFormatError(f"operation {name!r} parameters must be a mapping")
        own = {
            pname: ParameterDef.from_resource(pname, praw)
            for pname, praw in raw_params.items()
        }

        return cls(
            name=name,
            http_method=method.upper(),
            uri_template=uri,
            parameters=MappingProxyType(with_global_parameters(own)),
            summary=str(raw.get("summary", "")),
        )


@dataclass(frozen=True, slots=True)
class Description:
    """
    Fully merged operation registry for one API base URL.

    Shared read-only by every client pointed at the same domain; a domain change
    produces a new instance instead of mutating this one.
    """

    base_url: str
    operations: Mapping[str, OperationDef] = field(default_factory=_empty)
    models: Mapping[str, Any] = field(default_factory=_empty)
    # Remaining top-level sections (name, apiVersion, description, ...).
    extras: Mapping[str, Any] = field(default_factory=_empty)

    def operation(self, name: str) -> OperationDef:
        try:
            return self.operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None
