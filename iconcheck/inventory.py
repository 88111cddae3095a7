"""Inventory of icon asset files per category."""

from __future__ import annotations

from pathlib import Path

from .collector import ScanError
from .config import DEFAULT_ICON_EXTENSION
from .logging import get_logger
from .models import AssetInventory

_logger = get_logger("inventory")


def load_inventory(
    directory: Path,
    icon_extension: str = DEFAULT_ICON_EXTENSION,
    category: str | None = None,
) -> AssetInventory:
    """Return bare icon names of the files in ``directory`` ending in ``icon_extension``.

    A missing directory yields an empty inventory, so every usage of the
    category is reported as missing.
    """
    name = category or directory.name
    if not directory.is_dir():
        _logger.debug("No asset directory for category %s at %s", name, directory)
        return AssetInventory(category=name, directory=directory, icon_extension=icon_extension)

    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise ScanError(f"Cannot read asset directory {directory}: {exc}") from exc

    # Only regular files count; a directory named like an icon is ignored.
    names = frozenset(
        entry.name[: -len(icon_extension)]
        for entry in entries
        if entry.is_file()
        and entry.name.endswith(icon_extension)
        and len(entry.name) > len(icon_extension)
    )
    _logger.debug("Category %s: %d icon files in %s", name, len(names), directory)
    return AssetInventory(
        category=name,
        directory=directory,
        icon_extension=icon_extension,
        names=names,
    )


__all__ = ["load_inventory"]
