"""Type definitions for configuration tree operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleInvocation:
    """One module call found in a configuration tree.

    Attributes:
        path: Names of the ancestor module calls, empty for the root module
        local_name: Name of the module block at the call site
        source: Raw source string of the call
        version: Pinned version string, empty if the call declares none
    """

    path: tuple[str, ...]
    local_name: str
    source: str
    version: str
