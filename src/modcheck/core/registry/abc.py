"""Abstract base class for module registry operations."""

from abc import ABC, abstractmethod

from modcheck.core.registry.types import RegistryConfig, RegistryModule


class ModuleRegistry(ABC):
    """Abstract interface for listing modules published to a registry.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def list_modules(self, config: RegistryConfig) -> list[RegistryModule]:
        """List the latest version of every module published for an organization.

        Public mode queries the public registry for verified modules in the
        namespace named by config.organization, bounded to one page. Private mode
        queries config.address with config.token as bearer credentials.

        Args:
            config: Registry mode, address, organization and credentials

        Returns:
            Module entries in registry response order

        Raises:
            RegistryUnreachable: Transport failure or non-success HTTP status
            RegistryResponseInvalid: Payload is not a module list
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release connections held by the registry client."""
        ...
