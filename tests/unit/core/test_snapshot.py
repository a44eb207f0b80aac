"""Tests for registry snapshot construction."""

import pytest

from modcheck.core.errors import RegistryUnreachable
from modcheck.core.registry.fake import FakeModuleRegistry
from modcheck.core.registry.types import RegistryConfig, RegistryKind, RegistryModule
from modcheck.core.snapshot import RegistrySnapshot, build_snapshot, module_key


def test_module_key_joins_segments_without_changing_case() -> None:
    assert module_key("Acme", "VPC", "aws") == "Acme/VPC/aws"


def test_build_private_snapshot() -> None:
    registry = FakeModuleRegistry(
        modules=[
            RegistryModule(namespace="acme", name="vpc", provider="aws", version="2.1.0"),
            RegistryModule(namespace="acme", name="db", provider="aws", version="0.9.3"),
        ]
    )
    config = RegistryConfig(organization="acme", token="t")

    snapshot = build_snapshot(registry, config)

    assert snapshot.kind is RegistryKind.PRIVATE
    assert dict(snapshot) == {"acme/vpc/aws": "2.1.0", "acme/db/aws": "0.9.3"}
    assert registry.list_modules_calls == [config]


def test_build_public_snapshot() -> None:
    registry = FakeModuleRegistry(
        modules=[
            RegistryModule(
                namespace="terraform-aws-modules", name="vpc", provider="aws", version="5.5.1"
            )
        ]
    )
    config = RegistryConfig(organization="terraform-aws-modules", public_registry=True)

    snapshot = build_snapshot(registry, config)

    assert snapshot.kind is RegistryKind.PUBLIC
    assert snapshot["terraform-aws-modules/vpc/aws"] == "5.5.1"


def test_duplicate_keys_last_entry_wins() -> None:
    snapshot = RegistrySnapshot.from_modules(
        RegistryKind.PRIVATE,
        [
            RegistryModule(namespace="acme", name="vpc", provider="aws", version="1.0.0"),
            RegistryModule(namespace="acme", name="vpc", provider="aws", version="2.0.0"),
        ],
    )

    assert dict(snapshot) == {"acme/vpc/aws": "2.0.0"}


def test_snapshot_is_read_only() -> None:
    snapshot = RegistrySnapshot.from_modules(
        RegistryKind.PRIVATE,
        [RegistryModule(namespace="acme", name="vpc", provider="aws", version="1.0.0")],
    )

    with pytest.raises(TypeError):
        snapshot.latest_versions["acme/vpc/aws"] = "9.9.9"  # type: ignore[index]


def test_missing_key_is_absent() -> None:
    snapshot = RegistrySnapshot.from_modules(RegistryKind.PRIVATE, [])

    assert "acme/vpc/aws" not in snapshot
    assert snapshot.get("acme/vpc/aws") is None
    assert len(snapshot) == 0


def test_registry_error_propagates() -> None:
    registry = FakeModuleRegistry(error=RegistryUnreachable("down", status_code=503))

    with pytest.raises(RegistryUnreachable):
        build_snapshot(registry, RegistryConfig(organization="acme", token="t"))


def test_foreign_organization_entries_are_kept(caplog: pytest.LogCaptureFixture) -> None:
    registry = FakeModuleRegistry(
        modules=[RegistryModule(namespace="other", name="vpc", provider="aws", version="1.0.0")]
    )

    snapshot = build_snapshot(registry, RegistryConfig(organization="acme", token="t"))

    assert dict(snapshot) == {"other/vpc/aws": "1.0.0"}
    assert "belongs to organization 'other'" in caplog.text
