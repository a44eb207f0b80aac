"""Exception types raised by modcheck operations.

Registry failures are fatal to a validation run: a missing snapshot cannot be
told apart from "every module is current", so no partial result is produced.
A module that is simply absent from the registry is not an error.
"""


class ModcheckError(Exception):
    """Base class for all modcheck errors."""


class ConfigurationError(ModcheckError):
    """Registry configuration is incomplete or the config file is unreadable."""


class ModuleTreeError(ModcheckError):
    """The configuration tree could not be read."""


class RegistryError(ModcheckError):
    """Base class for module registry failures."""


class RegistryUnreachable(RegistryError):
    """Transport failure or non-success status from the registry.

    Attributes:
        status_code: HTTP status returned by the registry, None for transport errors
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RegistryResponseInvalid(RegistryError):
    """Registry payload could not be decoded into a module list."""
