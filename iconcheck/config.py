"""Configuration loading for iconcheck (.iconcheck.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".iconcheck.yml"

DEFAULT_SOURCE_ROOT = "resources/js"
DEFAULT_ICON_ROOT = "resources/assets/icons"
DEFAULT_EXTENSIONS = (".vue", ".ts")
DEFAULT_ICON_EXTENSION = ".svg"
OUTPUT_FORMATS = ("text", "json")


class ConfigError(RuntimeError):
    """Raised when the configuration is invalid or the icon root is unusable."""


@dataclass
class FailOnConfig:
    """Findings besides missing icons that should fail the run."""

    collisions: bool = False
    unused: bool = False


@dataclass
class IconCheckConfig:
    """Represents the settings defined in .iconcheck.yml."""

    root: Path
    source_root: Path
    icon_root: Path
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    icon_extension: str = DEFAULT_ICON_EXTENSION
    exclude_paths: List[str] = field(default_factory=list)
    output_format: str = "text"
    fail_on: FailOnConfig = field(default_factory=FailOnConfig)

    @classmethod
    def defaults(cls, root: Path) -> "IconCheckConfig":
        return cls(
            root=root,
            source_root=root / DEFAULT_SOURCE_ROOT,
            icon_root=root / DEFAULT_ICON_ROOT,
        )

    def with_overrides(
        self,
        *,
        source_root: Optional[str] = None,
        icon_root: Optional[str] = None,
        extensions: Optional[Sequence[str]] = None,
        icon_extension: Optional[str] = None,
        exclude_paths: Optional[Sequence[str]] = None,
        output_format: Optional[str] = None,
        fail_on_collisions: Optional[bool] = None,
        fail_on_unused: Optional[bool] = None,
    ) -> "IconCheckConfig":
        """Return a copy with command-line overrides applied."""
        updated = replace(self, fail_on=replace(self.fail_on))
        if source_root:
            updated.source_root = _resolve(self.root, source_root)
        if icon_root:
            updated.icon_root = _resolve(self.root, icon_root)
        if extensions:
            updated.extensions = [_normalise_extension(ext) for ext in extensions]
        if icon_extension:
            updated.icon_extension = _normalise_extension(icon_extension)
        if exclude_paths:
            updated.exclude_paths = [*self.exclude_paths, *exclude_paths]
        if output_format:
            updated.output_format = _validate_format(output_format)
        if fail_on_collisions:
            updated.fail_on.collisions = True
        if fail_on_unused:
            updated.fail_on.unused = True
        return updated


def load_config(config_path: Path) -> IconCheckConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = IconCheckConfig.defaults(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source_root = _as_str(data.get("source_root"), "source_root")
    if source_root:
        config.source_root = _resolve(root, source_root)

    icon_root = _as_str(data.get("icon_root"), "icon_root")
    if icon_root:
        config.icon_root = _resolve(root, icon_root)

    if "extensions" in data:
        extensions = _as_str_list(data.get("extensions"), "extensions")
        if not extensions:
            raise ConfigError("extensions must list at least one file suffix")
        config.extensions = [_normalise_extension(ext) for ext in extensions]

    icon_extension = _as_str(data.get("icon_extension"), "icon_extension")
    if icon_extension:
        config.icon_extension = _normalise_extension(icon_extension)

    config.exclude_paths = _as_str_list(data.get("exclude_paths"), "exclude_paths")

    output_format = _as_str(data.get("format"), "format")
    if output_format:
        config.output_format = _validate_format(output_format)

    fail_on_data = data.get("fail_on")
    if fail_on_data is not None:
        if not isinstance(fail_on_data, dict):
            raise ConfigError("fail_on must be a mapping")
        config.fail_on = FailOnConfig(
            collisions=_as_bool(fail_on_data.get("collisions"), "fail_on.collisions"),
            unused=_as_bool(fail_on_data.get("unused"), "fail_on.unused"),
        )

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _resolve(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path


def _normalise_extension(value: str) -> str:
    value = value.strip()
    if not value:
        raise ConfigError("File extensions must not be empty")
    return value if value.startswith(".") else f".{value}"


def _validate_format(value: str) -> str:
    lowered = value.strip().lower()
    if lowered not in OUTPUT_FORMATS:
        choices = ", ".join(OUTPUT_FORMATS)
        raise ConfigError(f"Unknown output format '{value}' (expected one of: {choices})")
    return lowered


def _as_str(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(f"{key} must be a string")


def _as_bool(value: Any, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise ConfigError(f"{key} must be true or false")


def _as_str_list(value: Any, key: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"{key} must be a string or a list of strings")
