"""
brightpearl.description.resources

Resource loaders for declarative service descriptions.

Responsibilities:
- Resolve a resource name to its parsed mapping.
- Report missing resources as `ResourceNotFoundError` and undecodable ones as
  `DescriptionFormatError`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from typing import Any, Protocol

from brightpearl.errors import DescriptionFormatError, ResourceNotFoundError

ROOT_RESOURCE = "service-config"


class ResourceLoader(Protocol):
    def load(self, name: str) -> Any: ...


class PackageResourceLoader:
    """
    Loads `<name>.json` files shipped as package data (default: `brightpearl.resources`).
    """

    def __init__(self, package: str = "brightpearl.resources") -> None:
        self._package = package

    def load(self, name: str) -> Any:
        # Names are plain identifiers; anything path-like cannot be a shipped resource.
        if not name or "/" in name or "\\" in name or name.startswith("."):
            raise ResourceNotFoundError(name)

        path = resources.files(self._package).joinpath(f"{name}.json")
        if not path.is_file():
            raise ResourceNotFoundError(name)

        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise DescriptionFormatError(f"resource {name!r} is not valid JSON: {e}") from e

    def __repr__(self) -> str:
        return f"PackageResourceLoader({self._package!r})"


class MappingResourceLoader:
    """
    In-memory loader, used by tests and by callers assembling descriptions at runtime.
    """

    def __init__(self, resources: Mapping[str, Any]) -> None:
        self._resources = dict(resources)

    def load(self, name: str) -> Any:
        try:
            return self._resources[name]
        except KeyError:
            raise ResourceNotFoundError(name) from None


default_loader = PackageResourceLoader()
