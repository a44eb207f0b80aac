"""Tests for finding diagnostics."""

from modcheck.core.findings import Finding, ValidationResult, module_address
from modcheck.core.registry.types import RegistryKind


def _finding(**overrides) -> Finding:
    values = dict(
        matched_registry=RegistryKind.PRIVATE,
        module_address=None,
        local_name="vpc",
        source="app.terraform.io/acme/vpc/aws",
        pinned_version="2.0.0",
        latest_version="2.1.0",
    )
    values.update(overrides)
    return Finding(**values)


def test_module_address_for_root_is_none() -> None:
    assert module_address(()) is None


def test_module_address_interleaves_module_prefix() -> None:
    assert module_address(("a",)) == "module.a"
    assert module_address(("net", "db")) == "module.net.module.db"


def test_describe_root_finding() -> None:
    assert _finding().describe() == (
        "Private module app.terraform.io/acme/vpc/aws used in root has version 2.0.0 "
        "that is not the most recent version 2.1.0"
    )


def test_describe_nested_public_finding() -> None:
    finding = _finding(
        matched_registry=RegistryKind.PUBLIC,
        module_address="module.net.module.db",
        source="terraform-aws-modules/vpc/aws",
        pinned_version="5.0.0",
        latest_version="5.5.1",
    )

    assert finding.describe() == (
        "Public module terraform-aws-modules/vpc/aws used in module.net.module.db "
        "has version 5.0.0 that is not the most recent version 5.5.1"
    )


def test_describe_unpublished_private_module() -> None:
    finding = _finding(source="app.terraform.io/acme/dns/aws", latest_version=None)

    assert finding.describe() == (
        "Private module app.terraform.io/acme/dns/aws used in root "
        "is not published in the private registry"
    )


def test_validation_result_is_validated_only_without_findings() -> None:
    assert ValidationResult(findings=()).validated is True
    assert ValidationResult(findings=(_finding(),)).validated is False
