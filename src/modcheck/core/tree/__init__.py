"""Configuration tree subpackage.

This subpackage provides abstractions over reading module calls from a
configuration tree with support for testing via fakes.
"""

from modcheck.core.tree.abc import ModuleTreeWalker
from modcheck.core.tree.fake import FakeModuleTreeWalker
from modcheck.core.tree.real import TerraformModuleTreeWalker
from modcheck.core.tree.types import ModuleInvocation

__all__ = [
    "ModuleTreeWalker",
    "FakeModuleTreeWalker",
    "TerraformModuleTreeWalker",
    "ModuleInvocation",
]
