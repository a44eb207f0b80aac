"""Fake module registry for testing.

FakeModuleRegistry is an in-memory implementation that accepts pre-configured
state in its constructor. Construct instances directly with keyword arguments.
"""

from modcheck.core.errors import RegistryError
from modcheck.core.registry.abc import ModuleRegistry
from modcheck.core.registry.types import RegistryConfig, RegistryModule


class FakeModuleRegistry(ModuleRegistry):
    """In-memory fake implementation of module registry operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        modules: list[RegistryModule] | None = None,
        error: RegistryError | None = None,
    ) -> None:
        """Create FakeModuleRegistry with pre-configured state.

        Args:
            modules: Entries returned by list_modules, in response order
            error: If set, list_modules raises it instead of returning modules
        """
        self._modules = modules or []
        self._error = error
        self._list_modules_calls: list[RegistryConfig] = []
        self._closed = False

    @property
    def list_modules_calls(self) -> list[RegistryConfig]:
        """Read-only access to tracked list_modules() calls for test assertions."""
        return self._list_modules_calls

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def list_modules(self, config: RegistryConfig) -> list[RegistryModule]:
        self._list_modules_calls.append(config)
        if self._error is not None:
            raise self._error
        return list(self._modules)

    def close(self) -> None:
        self._closed = True
