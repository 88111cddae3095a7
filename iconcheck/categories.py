"""Icon category discovery from the asset directory layout."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import ConfigError
from .logging import get_logger
from .models import Category

_logger = get_logger("categories")


def discover_categories(icon_root: Path) -> List[Category]:
    """Return one category per immediate subdirectory of ``icon_root``, sorted by name."""
    if not icon_root.exists():
        raise ConfigError(f"Icon asset root not found: {icon_root}")
    if not icon_root.is_dir():
        raise ConfigError(f"Icon asset root is not a directory: {icon_root}")

    try:
        children = sorted(icon_root.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise ConfigError(f"Icon asset root is not readable: {icon_root}: {exc}") from exc

    categories = [Category.from_name(child.name) for child in children if child.is_dir()]
    _logger.debug(
        "Discovered %d icon categories under %s: %s",
        len(categories),
        icon_root,
        ", ".join(category.name for category in categories) or "(none)",
    )
    return categories


__all__ = ["discover_categories"]
