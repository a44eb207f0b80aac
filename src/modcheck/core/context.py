"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from modcheck.core.registry.abc import ModuleRegistry
from modcheck.core.registry.real import RealModuleRegistry
from modcheck.core.tree.abc import ModuleTreeWalker
from modcheck.core.tree.real import TerraformModuleTreeWalker


@dataclass(frozen=True)
class ModcheckContext:
    """Immutable context holding all dependencies for modcheck operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: ModuleRegistry
    walker: ModuleTreeWalker
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        registry: ModuleRegistry | None = None,
        walker: ModuleTreeWalker | None = None,
        cwd: Path | None = None,
    ) -> "ModcheckContext":
        """Create test context with optional pre-configured integration classes.

        Any integration left as None is replaced by an empty fake.

        Example:
            >>> module = RegistryModule("acme", "vpc", "aws", "2.1.0")
            >>> registry = FakeModuleRegistry(modules=[module])
            >>> ctx = ModcheckContext.for_test(registry=registry)
        """
        from modcheck.core.registry.fake import FakeModuleRegistry
        from modcheck.core.tree.fake import FakeModuleTreeWalker

        if registry is None:
            registry = FakeModuleRegistry()

        if walker is None:
            walker = FakeModuleTreeWalker()

        return ModcheckContext(
            registry=registry,
            walker=walker,
            cwd=cwd or Path("/test/default/cwd"),
        )


def create_context() -> ModcheckContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    return ModcheckContext(
        registry=RealModuleRegistry(),
        walker=TerraformModuleTreeWalker(),
        cwd=Path.cwd(),
    )
