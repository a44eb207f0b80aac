"""Module registry subpackage.

This subpackage provides abstractions over module registry APIs with support
for testing via fakes.
"""

from modcheck.core.registry.abc import ModuleRegistry
from modcheck.core.registry.fake import FakeModuleRegistry
from modcheck.core.registry.real import RealModuleRegistry
from modcheck.core.registry.types import RegistryConfig, RegistryKind, RegistryModule

__all__ = [
    "ModuleRegistry",
    "FakeModuleRegistry",
    "RealModuleRegistry",
    "RegistryConfig",
    "RegistryKind",
    "RegistryModule",
]
