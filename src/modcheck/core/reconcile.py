"""Reconcile configuration module calls against a registry snapshot."""

import logging
from collections.abc import Sequence

from modcheck.core.findings import Finding, ValidationResult, module_address
from modcheck.core.registry.types import RegistryConfig, RegistryKind
from modcheck.core.snapshot import ModuleKey, RegistrySnapshot
from modcheck.core.tree.types import ModuleInvocation

logger = logging.getLogger(__name__)


def derive_module_key(source: str, config: RegistryConfig) -> tuple[RegistryKind, ModuleKey]:
    """Classify a source string and derive its registry key.

    Sources starting with "<address>/<organization>" reference the private
    registry; the "<address>/" prefix is stripped, leaving
    "organization/name/provider". Any other source is taken verbatim as a
    candidate public "namespace/name/provider" key.
    """
    if source.startswith(config.private_source_prefix):
        return RegistryKind.PRIVATE, source.removeprefix(f"{config.address}/")
    return RegistryKind.PUBLIC, source


def check_invocation(
    invocation: ModuleInvocation,
    snapshot: RegistrySnapshot,
    config: RegistryConfig,
) -> Finding | None:
    """Compare one module call to the snapshot. Versions compare as exact strings."""
    kind, key = derive_module_key(invocation.source, config)
    latest = snapshot.get(key)

    if latest is None:
        if kind is RegistryKind.PRIVATE and config.strict:
            return Finding(
                matched_registry=kind,
                module_address=module_address(invocation.path),
                local_name=invocation.local_name,
                source=invocation.source,
                pinned_version=invocation.version,
                latest_version=None,
            )
        logger.debug("Skipping %s: %s is not in the registry snapshot", invocation.source, key)
        return None

    if invocation.version == latest:
        return None

    return Finding(
        matched_registry=kind,
        module_address=module_address(invocation.path),
        local_name=invocation.local_name,
        source=invocation.source,
        pinned_version=invocation.version,
        latest_version=latest,
    )


def reconcile(
    snapshot: RegistrySnapshot,
    invocations: Sequence[ModuleInvocation],
    config: RegistryConfig,
) -> ValidationResult:
    """Check every module call, keeping findings in walk order."""
    findings: list[Finding] = []
    for invocation in invocations:
        finding = check_invocation(invocation, snapshot, config)
        if finding is not None:
            findings.append(finding)
    return ValidationResult(findings=tuple(findings))
