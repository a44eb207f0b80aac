"""modcheck: verify Terraform module calls pin the latest registry version."""

from modcheck.core.findings import Finding, ValidationResult
from modcheck.core.registry.types import RegistryConfig, RegistryKind

__all__ = [
    "Finding",
    "RegistryConfig",
    "RegistryKind",
    "ValidationResult",
]
