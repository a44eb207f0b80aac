"""Production configuration tree walker backed by python-hcl2."""

import json
import logging
from pathlib import Path
from typing import Any

import hcl2
from lark.exceptions import LarkError

from modcheck.core.errors import ModuleTreeError
from modcheck.core.tree.abc import ModuleTreeWalker
from modcheck.core.tree.types import ModuleInvocation

logger = logging.getLogger(__name__)

MODULES_MANIFEST = Path(".terraform") / "modules" / "modules.json"
LOCAL_SOURCE_PREFIXES = ("./", "../")


def _unquote(value: Any) -> str:
    """Render an HCL value as a plain string.

    Newer python-hcl2 releases keep the surrounding quotes on strings and labels.
    """
    text = str(value)
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def parse_module_calls(tf_text: str) -> list[tuple[str, str, str]]:
    """Extract (name, source, version) for each module block, in declaration order.

    Raises:
        ModuleTreeError: The text is not valid HCL
    """
    try:
        obj = hcl2.loads(tf_text)
    except LarkError as e:
        raise ModuleTreeError(f"Invalid HCL: {e}") from e

    calls: list[tuple[str, str, str]] = []
    for block in obj.get("module", []):
        for name, attrs in block.items():
            if not isinstance(attrs, dict):
                continue
            source = attrs.get("source")
            if source is None:
                continue
            version = attrs.get("version")
            calls.append(
                (_unquote(name), _unquote(source), "" if version is None else _unquote(version))
            )
    return calls


def read_modules_manifest(root_dir: Path) -> dict[str, Path]:
    """Map module keys ("a.b") to installed directories from `terraform init` output.

    Returns an empty dict when the configuration has not been initialized.
    """
    manifest_path = root_dir / MODULES_MANIFEST
    if not manifest_path.exists():
        return {}

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ModuleTreeError(f"Invalid module manifest {manifest_path}: {e}") from e

    dirs: dict[str, Path] = {}
    for entry in data.get("Modules", []):
        key = entry.get("Key")
        module_dir = entry.get("Dir")
        if key and module_dir:
            dirs[key] = root_dir / module_dir
    return dirs


class TerraformModuleTreeWalker(ModuleTreeWalker):
    """Walks a Terraform configuration on disk.

    Module calls in a directory are read from its *.tf files in sorted file order
    and declaration order. The walk is pre-order: every call at a path is emitted
    before descending into each call's own module, in call order.

    Child modules are located through the `.terraform/modules/modules.json`
    manifest, falling back to local "./" and "../" sources. Calls that resolve
    to neither (remote sources before `terraform init`) are not descended into.
    """

    def walk(self, root_dir: Path) -> list[ModuleInvocation]:
        if not root_dir.is_dir():
            raise ModuleTreeError(f"Configuration directory not found: {root_dir}")

        manifest = read_modules_manifest(root_dir)
        invocations: list[ModuleInvocation] = []
        self._walk_module(
            root_dir=root_dir,
            module_dir=root_dir,
            path=(),
            manifest=manifest,
            ancestors=frozenset({root_dir.resolve()}),
            invocations=invocations,
        )
        return invocations

    def _module_calls(self, module_dir: Path) -> list[tuple[str, str, str]]:
        calls: list[tuple[str, str, str]] = []
        for tf_file in sorted(module_dir.glob("*.tf")):
            try:
                calls.extend(parse_module_calls(tf_file.read_text(encoding="utf-8")))
            except ModuleTreeError as e:
                raise ModuleTreeError(f"{tf_file}: {e}") from e
        return calls

    def _walk_module(
        self,
        *,
        root_dir: Path,
        module_dir: Path,
        path: tuple[str, ...],
        manifest: dict[str, Path],
        ancestors: frozenset[Path],
        invocations: list[ModuleInvocation],
    ) -> None:
        calls = self._module_calls(module_dir)
        for name, source, version in calls:
            invocations.append(
                ModuleInvocation(path=path, local_name=name, source=source, version=version)
            )

        for name, source, _version in calls:
            child_path = (*path, name)
            child_dir = self._resolve_child_dir(module_dir, child_path, source, manifest)
            if child_dir is None:
                logger.debug("Not descending into %s (%s)", ".".join(child_path), source)
                continue

            resolved = child_dir.resolve()
            if resolved in ancestors:
                logger.debug("Skipping recursive module call %s", ".".join(child_path))
                continue

            self._walk_module(
                root_dir=root_dir,
                module_dir=child_dir,
                path=child_path,
                manifest=manifest,
                ancestors=ancestors | {resolved},
                invocations=invocations,
            )

    def _resolve_child_dir(
        self,
        module_dir: Path,
        child_path: tuple[str, ...],
        source: str,
        manifest: dict[str, Path],
    ) -> Path | None:
        installed = manifest.get(".".join(child_path))
        if installed is not None and installed.is_dir():
            return installed
        if source.startswith(LOCAL_SOURCE_PREFIXES):
            local_dir = module_dir / source
            if local_dir.is_dir():
                return local_dir
        return None
