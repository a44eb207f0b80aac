"""Tests for TerraformModuleTreeWalker against configurations on disk."""

import json
from pathlib import Path

import pytest
from lark.exceptions import LarkError

from modcheck.core.errors import ModuleTreeError
from modcheck.core.tree.real import (
    TerraformModuleTreeWalker,
    parse_module_calls,
    read_modules_manifest,
)
from modcheck.core.tree.types import ModuleInvocation


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_parse_module_calls_in_declaration_order() -> None:
    tf_text = """
module "vpc" {
  source  = "app.terraform.io/acme/vpc/aws"
  version = "2.0.0"
}

module "local" {
  source = "./modules/local"
}
"""
    assert parse_module_calls(tf_text) == [
        ("vpc", "app.terraform.io/acme/vpc/aws", "2.0.0"),
        ("local", "./modules/local", ""),
    ]


def test_parse_module_calls_ignores_other_blocks() -> None:
    tf_text = """
variable "region" {
  default = "us-east-1"
}

resource "aws_s3_bucket" "logs" {
  bucket = "acme-logs"
}
"""
    assert parse_module_calls(tf_text) == []


def test_parse_invalid_hcl_raises() -> None:
    with pytest.raises(ModuleTreeError, match="Invalid HCL"):
        parse_module_calls('module "vpc" {\n  source = \n')


def test_parse_invalid_hcl_chains_parser_error() -> None:
    with pytest.raises(ModuleTreeError) as exc_info:
        parse_module_calls('module "vpc" {\n  source = \n')

    assert isinstance(exc_info.value.__cause__, LarkError)


def test_walk_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ModuleTreeError, match="not found"):
        TerraformModuleTreeWalker().walk(tmp_path / "missing")


def test_walk_root_and_local_children_pre_order(tmp_path: Path) -> None:
    _write(
        tmp_path / "main.tf",
        """
module "net" {
  source = "./modules/net"
}

module "vpc" {
  source  = "app.terraform.io/acme/vpc/aws"
  version = "2.0.0"
}
""",
    )
    _write(
        tmp_path / "modules" / "net" / "main.tf",
        """
module "db" {
  source  = "app.terraform.io/acme/db/aws"
  version = "0.9.0"
}

module "dns" {
  source = "../dns"
}
""",
    )
    _write(
        tmp_path / "modules" / "dns" / "main.tf",
        """
module "zone" {
  source  = "terraform-aws-modules/route53/aws"
  version = "2.10.0"
}
""",
    )

    invocations = TerraformModuleTreeWalker().walk(tmp_path)

    assert invocations == [
        ModuleInvocation(path=(), local_name="net", source="./modules/net", version=""),
        ModuleInvocation(
            path=(), local_name="vpc", source="app.terraform.io/acme/vpc/aws", version="2.0.0"
        ),
        ModuleInvocation(
            path=("net",), local_name="db", source="app.terraform.io/acme/db/aws", version="0.9.0"
        ),
        ModuleInvocation(path=("net",), local_name="dns", source="../dns", version=""),
        ModuleInvocation(
            path=("net", "dns"),
            local_name="zone",
            source="terraform-aws-modules/route53/aws",
            version="2.10.0",
        ),
    ]


def test_walk_reads_files_in_sorted_order(tmp_path: Path) -> None:
    _write(tmp_path / "b.tf", 'module "second" {\n  source = "acme/b/aws"\n}\n')
    _write(tmp_path / "a.tf", 'module "first" {\n  source = "acme/a/aws"\n}\n')

    invocations = TerraformModuleTreeWalker().walk(tmp_path)

    assert [i.local_name for i in invocations] == ["first", "second"]


def test_walk_descends_into_installed_modules(tmp_path: Path) -> None:
    _write(
        tmp_path / "main.tf",
        """
module "vpc" {
  source  = "app.terraform.io/acme/vpc/aws"
  version = "2.0.0"
}
""",
    )
    _write(
        tmp_path / ".terraform" / "modules" / "vpc" / "main.tf",
        """
module "subnets" {
  source  = "app.terraform.io/acme/subnets/aws"
  version = "1.1.0"
}
""",
    )
    _write(
        tmp_path / ".terraform" / "modules" / "modules.json",
        json.dumps(
            {
                "Modules": [
                    {"Key": "", "Source": "", "Dir": "."},
                    {
                        "Key": "vpc",
                        "Source": "app.terraform.io/acme/vpc/aws",
                        "Version": "2.0.0",
                        "Dir": ".terraform/modules/vpc",
                    },
                ]
            }
        ),
    )

    invocations = TerraformModuleTreeWalker().walk(tmp_path)

    assert [(i.path, i.local_name) for i in invocations] == [((), "vpc"), (("vpc",), "subnets")]


def test_walk_does_not_descend_into_uninstalled_remote_modules(tmp_path: Path) -> None:
    _write(
        tmp_path / "main.tf",
        'module "vpc" {\n  source  = "app.terraform.io/acme/vpc/aws"\n  version = "2.0.0"\n}\n',
    )

    invocations = TerraformModuleTreeWalker().walk(tmp_path)

    assert len(invocations) == 1


def test_walk_stops_at_recursive_local_module(tmp_path: Path) -> None:
    _write(tmp_path / "main.tf", 'module "self" {\n  source = "./"\n}\n')

    invocations = TerraformModuleTreeWalker().walk(tmp_path)

    assert invocations == [ModuleInvocation(path=(), local_name="self", source="./", version="")]


def test_walk_reports_file_with_invalid_hcl(tmp_path: Path) -> None:
    _write(tmp_path / "broken.tf", 'module "vpc" {\n  source = \n')

    with pytest.raises(ModuleTreeError, match="broken.tf"):
        TerraformModuleTreeWalker().walk(tmp_path)


def test_read_modules_manifest_missing_returns_empty(tmp_path: Path) -> None:
    assert read_modules_manifest(tmp_path) == {}


def test_read_modules_manifest_invalid_json_raises(tmp_path: Path) -> None:
    _write(tmp_path / ".terraform" / "modules" / "modules.json", "{")

    with pytest.raises(ModuleTreeError, match="Invalid module manifest"):
        read_modules_manifest(tmp_path)
