"""Parsing utilities for module registry responses."""

import json
from typing import Any

from modcheck.core.errors import RegistryResponseInvalid
from modcheck.core.registry.types import RegistryModule


def _require_str(entry: dict[str, Any], field: str, index: int) -> str:
    value = entry.get(field)
    if not isinstance(value, str) or not value:
        msg = f"Module entry {index} has no valid '{field}' field"
        raise RegistryResponseInvalid(msg)
    return value


def parse_module_entry(entry: Any, index: int) -> RegistryModule:
    """Parse a single module descriptor.

    The owning segment is read from "namespace", falling back to "organization"
    for registries that report it under that name.
    """
    if not isinstance(entry, dict):
        msg = f"Module entry {index} is not an object"
        raise RegistryResponseInvalid(msg)

    owner_field = "namespace" if "namespace" in entry else "organization"
    return RegistryModule(
        namespace=_require_str(entry, owner_field, index),
        name=_require_str(entry, "name", index),
        provider=_require_str(entry, "provider", index),
        version=_require_str(entry, "version", index),
    )


def parse_module_list(json_str: str) -> list[RegistryModule]:
    """Parse a registry module listing.

    Args:
        json_str: Response body, a JSON object with a "modules" list

    Returns:
        Module entries in response order

    Raises:
        RegistryResponseInvalid: Body is not JSON or does not have the module-list shape
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        msg = f"Registry response is not valid JSON: {e}"
        raise RegistryResponseInvalid(msg) from e

    if not isinstance(data, dict):
        msg = "Registry response is not a JSON object"
        raise RegistryResponseInvalid(msg)

    modules = data.get("modules")
    if not isinstance(modules, list):
        msg = "Registry response has no 'modules' list"
        raise RegistryResponseInvalid(msg)

    return [parse_module_entry(entry, index) for index, entry in enumerate(modules)]
