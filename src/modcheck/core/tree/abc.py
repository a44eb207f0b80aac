"""Abstract base class for configuration tree walking."""

from abc import ABC, abstractmethod
from pathlib import Path

from modcheck.core.tree.types import ModuleInvocation


class ModuleTreeWalker(ABC):
    """Abstract interface for enumerating module calls in a configuration.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def walk(self, root_dir: Path) -> list[ModuleInvocation]:
        """Enumerate every module call in the tree rooted at root_dir.

        Args:
            root_dir: Directory of the root module

        Returns:
            Invocations for every path, root included, in a stable walk order

        Raises:
            ModuleTreeError: root_dir is missing or a file cannot be parsed
        """
        ...
