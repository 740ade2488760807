"""
brightpearl.description.builder

Assembles one `Description` from the root resource and its sub-service resources.

Responsibilities:
- Seed the description with the base URL for an API domain.
- Parse each sub-service's operations (injecting the global parameter catalog).
- Merge sections across sub-services deterministically.

Merge order:
- Sub-services are processed in the order the root resource lists them.
- For every section, the first definition of a key wins; later sub-services can only
  add new operation/model names, never replace existing ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from brightpearl.description.models import Description, OperationDef
from brightpearl.description.resources import ROOT_RESOURCE, ResourceLoader
from brightpearl.errors import DescriptionFormatError
from brightpearl.observability.logging import get_logger

log = get_logger(__name__)

SERVICES_KEY = "services"


def build_description(loader: ResourceLoader, api_domain: str) -> Description:
    root = _require_mapping(ROOT_RESOURCE, loader.load(ROOT_RESOURCE))

    services = root.get(SERVICES_KEY, [])
    if not isinstance(services, list) or not all(isinstance(s, str) for s in services):
        raise DescriptionFormatError(f"{ROOT_RESOURCE!r} 'services' must be a list of names")

    sections: dict[str, Any] = {}
    operations: dict[str, OperationDef] = {}
    models: dict[str, Any] = {}

    # Root top-level defaults merge first; the service list itself is transient.
    defaults = {k: v for k, v in root.items() if k != SERVICES_KEY}
    _merge_service(ROOT_RESOURCE, defaults, operations=operations, models=models, sections=sections)

    for service_name in services:
        service = _require_mapping(service_name, loader.load(service_name))
        _merge_service(
            service_name, service, operations=operations, models=models, sections=sections
        )

    description = Description(
        base_url=f"https://{api_domain}",
        operations=MappingProxyType(operations),
        models=MappingProxyType(models),
        extras=MappingProxyType(sections),
    )
    log.info(
        "description_built",
        api_domain=api_domain,
        services=len(services),
        operations=len(operations),
        models=len(models),
    )
    return description


def _merge_service(
    service_name: str,
    service: Mapping[str, Any],
    *,
    operations: dict[str, OperationDef],
    models: dict[str, Any],
    sections: dict[str, Any],
) -> None:
    for section, value in service.items():
        if section == "operations":
            for name, raw in _require_mapping(f"{service_name}.operations", value).items():
                if name in operations:
                    log.debug("operation_shadowed", operation=name, service=service_name)
                    continue
                operations[name] = OperationDef.from_resource(name, raw)
        elif section == "models":
            for name, raw in _require_mapping(f"{service_name}.models", value).items():
                models.setdefault(name, raw)
        elif isinstance(value, Mapping) and isinstance(sections.get(section), Mapping):
            sections[section] = {**value, **sections[section]}
        else:
            sections.setdefault(section, value)


def _require_mapping(name: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DescriptionFormatError(f"resource {name!r} must be a mapping")
    return value


# --- Module Notes -----------------------------------------------------------
# Building is a pure reconstruction: nothing here mutates a previously built
# Description, so concurrent readers of an old instance are unaffected.
