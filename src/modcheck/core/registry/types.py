"""Type definitions for module registry operations."""

from dataclasses import dataclass
from enum import Enum

PUBLIC_REGISTRY_HOST = "registry.terraform.io"
DEFAULT_PRIVATE_ADDRESS = "app.terraform.io"
PUBLIC_PAGE_LIMIT = 20


class RegistryKind(str, Enum):
    """Which registry a module reference was matched against."""

    PRIVATE = "Private"
    PUBLIC = "Public"


@dataclass(frozen=True)
class RegistryConfig:
    """Immutable registry settings for one validation run.

    Attributes:
        public_registry: Query the public registry instead of the private one
        address: Private registry host (e.g. "app.terraform.io")
        organization: Private organization, or public namespace in public mode
        token: Bearer token for the private registry (unused in public mode)
        strict: Report private-registry references missing from the registry
    """

    organization: str
    public_registry: bool = False
    address: str = DEFAULT_PRIVATE_ADDRESS
    token: str | None = None
    strict: bool = False

    @property
    def kind(self) -> RegistryKind:
        return RegistryKind.PUBLIC if self.public_registry else RegistryKind.PRIVATE

    @property
    def private_source_prefix(self) -> str:
        """Source prefix identifying the private registry's own namespace."""
        return f"{self.address}/{self.organization}"


@dataclass(frozen=True)
class RegistryModule:
    """One module entry from a registry listing, at its latest version."""

    namespace: str  # public namespace, or organization for private registries
    name: str
    provider: str
    version: str
