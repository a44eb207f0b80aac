"""Validation run: snapshot the registry, walk the tree, reconcile."""

import logging
from pathlib import Path

from modcheck.core.context import ModcheckContext
from modcheck.core.findings import ValidationResult
from modcheck.core.reconcile import reconcile
from modcheck.core.registry.types import RegistryConfig
from modcheck.core.snapshot import build_snapshot

logger = logging.getLogger(__name__)


def validate_modules(
    ctx: ModcheckContext, config: RegistryConfig, root_dir: Path
) -> ValidationResult:
    """Validate that every module call under root_dir pins the latest registry version.

    The registry is queried before the tree is read, so a registry failure
    aborts the run without a partial result.

    Raises:
        RegistryUnreachable: Registry request failed
        RegistryResponseInvalid: Registry payload was malformed
        ModuleTreeError: Configuration could not be read
    """
    snapshot = build_snapshot(ctx.registry, config)
    invocations = ctx.walker.walk(root_dir)
    logger.debug("Found %d module call(s) under %s", len(invocations), root_dir)

    result = reconcile(snapshot, invocations, config)
    logger.debug("Validation produced %d finding(s)", len(result.findings))
    return result
