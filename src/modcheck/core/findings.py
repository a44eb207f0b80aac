"""Validation findings and their diagnostic text."""

from dataclasses import dataclass

from modcheck.core.registry.types import RegistryKind

ROOT_SCOPE = "root"


def module_address(path: tuple[str, ...]) -> str | None:
    """Address of the module at path, as the configuration language writes it.

    Returns None for the root module. Path ("a", "b") gives "module.a.module.b".
    """
    if not path:
        return None
    return ".".join(f"module.{name}" for name in path)


@dataclass(frozen=True)
class Finding:
    """A module call that does not pin the registry's latest version.

    Attributes:
        matched_registry: Registry the source was matched against
        module_address: Address of the calling module, None for root
        local_name: Name of the module block at the call site
        source: Raw source string of the call
        pinned_version: Version declared by the call
        latest_version: Latest registry version, None in strict mode when the
            module is not published at all
    """

    matched_registry: RegistryKind
    module_address: str | None
    local_name: str
    source: str
    pinned_version: str
    latest_version: str | None

    @property
    def is_root(self) -> bool:
        return self.module_address is None

    @property
    def scope(self) -> str:
        return self.module_address or ROOT_SCOPE

    def describe(self) -> str:
        """Human-readable diagnostic line."""
        kind = self.matched_registry.value
        if self.latest_version is None:
            return (
                f"{kind} module {self.source} used in {self.scope} "
                f"is not published in the {kind.lower()} registry"
            )
        return (
            f"{kind} module {self.source} used in {self.scope} has version "
            f"{self.pinned_version} that is not the most recent version {self.latest_version}"
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation run. validated is True iff there are no findings."""

    findings: tuple[Finding, ...]

    @property
    def validated(self) -> bool:
        return not self.findings
