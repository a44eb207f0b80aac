"""Pydantic models for JSON output schemas.

These models provide runtime validation of the documents emitted by
`--format json`.
"""

from pydantic import BaseModel, ConfigDict, Field

from modcheck.core.findings import Finding, ValidationResult
from modcheck.core.snapshot import RegistrySnapshot


class FindingInfo(BaseModel):
    """One finding in `modcheck check --format json` output."""

    model_config = ConfigDict(strict=True)

    registry: str = Field(..., pattern="^(Private|Public)$")
    module_address: str | None
    local_name: str
    source: str
    pinned_version: str
    latest_version: str | None
    message: str

    @staticmethod
    def from_finding(finding: Finding) -> "FindingInfo":
        return FindingInfo(
            registry=finding.matched_registry.value,
            module_address=finding.module_address,
            local_name=finding.local_name,
            source=finding.source,
            pinned_version=finding.pinned_version,
            latest_version=finding.latest_version,
            message=finding.describe(),
        )


class CheckCommandResponse(BaseModel):
    """JSON response schema for the `modcheck check` command.

    Attributes:
        validated: True iff no findings were produced
        path: Configuration directory that was checked
        findings: Findings in walk order
    """

    model_config = ConfigDict(strict=True)

    validated: bool
    path: str
    findings: list[FindingInfo]

    @staticmethod
    def from_result(result: ValidationResult, path: str) -> "CheckCommandResponse":
        return CheckCommandResponse(
            validated=result.validated,
            path=path,
            findings=[FindingInfo.from_finding(f) for f in result.findings],
        )


class RegistryModuleInfo(BaseModel):
    """One snapshot entry in `modcheck registry list --format json` output."""

    model_config = ConfigDict(strict=True)

    key: str
    latest_version: str


class RegistryListResponse(BaseModel):
    """JSON response schema for the `modcheck registry list` command."""

    model_config = ConfigDict(strict=True)

    registry: str = Field(..., pattern="^(Private|Public)$")
    modules: list[RegistryModuleInfo]

    @staticmethod
    def from_snapshot(snapshot: RegistrySnapshot) -> "RegistryListResponse":
        return RegistryListResponse(
            registry=snapshot.kind.value,
            modules=[
                RegistryModuleInfo(key=key, latest_version=version)
                for key, version in sorted(snapshot.items())
            ],
        )
