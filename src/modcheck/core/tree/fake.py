"""Fake configuration tree walker for testing."""

from pathlib import Path

from modcheck.core.tree.abc import ModuleTreeWalker
from modcheck.core.tree.types import ModuleInvocation


class FakeModuleTreeWalker(ModuleTreeWalker):
    """In-memory walker returning pre-configured invocations.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, invocations: list[ModuleInvocation] | None = None) -> None:
        self._invocations = invocations or []
        self._walk_calls: list[Path] = []

    @property
    def walk_calls(self) -> list[Path]:
        """Read-only access to root directories passed to walk()."""
        return self._walk_calls

    def walk(self, root_dir: Path) -> list[ModuleInvocation]:
        self._walk_calls.append(root_dir)
        return list(self._invocations)
