"""Registry snapshot: latest published version per module key."""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from modcheck.core.registry.abc import ModuleRegistry
from modcheck.core.registry.types import RegistryConfig, RegistryKind, RegistryModule

logger = logging.getLogger(__name__)

ModuleKey = str


def module_key(namespace: str, name: str, provider: str) -> ModuleKey:
    """Join key segments with "/". Case is preserved."""
    return "/".join((namespace, name, provider))


@dataclass(frozen=True)
class RegistrySnapshot(Mapping[ModuleKey, str]):
    """Immutable mapping of module key to latest version.

    A key that is absent means the module is unknown to the registry.
    """

    kind: RegistryKind
    latest_versions: Mapping[ModuleKey, str]

    def __getitem__(self, key: ModuleKey) -> str:
        return self.latest_versions[key]

    def __iter__(self) -> Iterator[ModuleKey]:
        return iter(self.latest_versions)

    def __len__(self) -> int:
        return len(self.latest_versions)

    @staticmethod
    def from_modules(kind: RegistryKind, modules: list[RegistryModule]) -> "RegistrySnapshot":
        """Index modules by key. On duplicate keys the later entry wins."""
        latest: dict[ModuleKey, str] = {}
        for module in modules:
            latest[module_key(module.namespace, module.name, module.provider)] = module.version
        return RegistrySnapshot(kind=kind, latest_versions=MappingProxyType(latest))


def build_snapshot(registry: ModuleRegistry, config: RegistryConfig) -> RegistrySnapshot:
    """Query the registry once and index the result.

    Raises:
        RegistryUnreachable: Propagated from the registry
        RegistryResponseInvalid: Propagated from the registry
    """
    modules = registry.list_modules(config)

    if not config.public_registry:
        for module in modules:
            if module.namespace != config.organization:
                logger.warning(
                    "Registry module %s/%s/%s belongs to organization %r, expected %r",
                    module.namespace,
                    module.name,
                    module.provider,
                    module.namespace,
                    config.organization,
                )

    snapshot = RegistrySnapshot.from_modules(config.kind, modules)
    logger.debug("Built %s registry snapshot with %d key(s)", config.kind.value, len(snapshot))
    return snapshot
