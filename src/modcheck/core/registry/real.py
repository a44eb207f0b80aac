"""Production implementation of module registry operations."""

import logging

import httpx

from modcheck.core.errors import ConfigurationError, RegistryUnreachable
from modcheck.core.registry.abc import ModuleRegistry
from modcheck.core.registry.parsing import parse_module_list
from modcheck.core.registry.types import (
    PUBLIC_PAGE_LIMIT,
    PUBLIC_REGISTRY_HOST,
    RegistryConfig,
    RegistryModule,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class RealModuleRegistry(ModuleRegistry):
    """Production implementation using the registry HTTP APIs.

    Each list_modules() call issues exactly one request. There are no retries:
    a failed request aborts the run.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize RealModuleRegistry.

        Args:
            client: HTTP client to use. Tests pass one built on httpx.MockTransport.
        """
        self._client = client or httpx.Client(timeout=DEFAULT_TIMEOUT_SECONDS)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RealModuleRegistry":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_modules(self, config: RegistryConfig) -> list[RegistryModule]:
        if config.public_registry:
            url = f"https://{PUBLIC_REGISTRY_HOST}/v1/modules/{config.organization}"
            params = {"limit": str(PUBLIC_PAGE_LIMIT), "verified": "true"}
            headers: dict[str, str] = {}
        else:
            if not config.token:
                msg = "A token is required to query a private registry"
                raise ConfigurationError(msg)
            url = f"https://{config.address}/api/registry/v1/modules/{config.organization}"
            params = {}
            headers = {"Authorization": f"Bearer {config.token}"}

        logger.debug("Listing registry modules from %s", url)
        try:
            response = self._client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            msg = f"Could not reach module registry at {url}: {e}"
            raise RegistryUnreachable(msg) from e

        if not response.is_success:
            msg = f"Module registry at {url} returned HTTP {response.status_code}"
            raise RegistryUnreachable(msg, status_code=response.status_code)

        modules = parse_module_list(response.text)
        logger.debug("Registry returned %d module(s)", len(modules))
        return modules
