import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

import tomlkit

from modcheck.core.errors import ConfigurationError
from modcheck.core.registry.types import DEFAULT_PRIVATE_ADDRESS, RegistryConfig

CONFIG_FILENAME = ".modcheck.toml"

T = TypeVar("T")


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `.modcheck.toml`.

    Unset fields are None so command-line options and environment variables
    can take precedence over them.
    """

    organization: str | None = None
    address: str | None = None
    public_registry: bool | None = None
    strict: bool | None = None


def load_config(config_dir: Path) -> LoadedConfig:
    """Load .modcheck.toml from the given directory if present; otherwise return defaults.

    Example config:
      [registry]
      organization = "acme"
      address = "app.terraform.io"
      public = false
      strict = false

    The registry token is never read from this file.
    """

    cfg_path = config_dir / CONFIG_FILENAME
    if not cfg_path.exists():
        return LoadedConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file {cfg_path}: {e}") from e

    registry = data.get("registry", {})
    if not isinstance(registry, dict):
        raise ConfigurationError(f"Invalid config file {cfg_path}: [registry] must be a table")

    return LoadedConfig(
        organization=_typed_value(cfg_path, registry, "organization", str),
        address=_typed_value(cfg_path, registry, "address", str),
        public_registry=_typed_value(cfg_path, registry, "public", bool),
        strict=_typed_value(cfg_path, registry, "strict", bool),
    )


def _typed_value(cfg_path: Path, registry: dict[str, Any], key: str, expected: type[T]) -> T | None:
    value = registry.get(key)
    if value is None:
        return None
    if not isinstance(value, expected):
        msg = (
            f"Invalid config file {cfg_path}: registry.{key} must be a "
            f"{expected.__name__}, got {value!r}"
        )
        raise ConfigurationError(msg)
    return value


def save_config(config_dir: Path, config: LoadedConfig) -> Path:
    """Save LoadedConfig to .modcheck.toml, preserving formatting.

    Existing keys and comments outside the written values are kept.
    Uses tomlkit to preserve TOML formatting and comments.
    """
    cfg_path = config_dir / CONFIG_FILENAME

    if cfg_path.exists():
        doc = tomlkit.parse(cfg_path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()

    if "registry" not in doc:
        doc["registry"] = tomlkit.table()

    registry = doc["registry"]
    if config.organization is not None:
        registry["organization"] = config.organization  # type: ignore[index]
    if config.address is not None:
        registry["address"] = config.address  # type: ignore[index]
    if config.public_registry is not None:
        registry["public"] = config.public_registry  # type: ignore[index]
    if config.strict is not None:
        registry["strict"] = config.strict  # type: ignore[index]

    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return cfg_path


def resolve_registry_config(
    loaded: LoadedConfig,
    *,
    public_registry: bool | None,
    address: str | None,
    organization: str | None,
    token: str | None,
    strict: bool | None,
) -> RegistryConfig:
    """Merge command-line values over the config file into a RegistryConfig.

    Raises:
        ConfigurationError: Organization is missing, or private mode has no token
    """
    resolved_public = _first_set(public_registry, loaded.public_registry, False)
    resolved_org = organization or loaded.organization
    if not resolved_org:
        msg = "An organization is required (--organization, MODCHECK_ORGANIZATION or config)"
        raise ConfigurationError(msg)
    if not resolved_public and not token:
        msg = "A token is required for the private registry (--token or TFE_TOKEN)"
        raise ConfigurationError(msg)

    return RegistryConfig(
        organization=resolved_org,
        public_registry=resolved_public,
        address=address or loaded.address or DEFAULT_PRIVATE_ADDRESS,
        token=token,
        strict=_first_set(strict, loaded.strict, False),
    )


def _first_set(*values: bool | None) -> bool:
    for value in values:
        if value is not None:
            return value
    return False
