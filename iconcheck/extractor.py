"""Reference token extraction from collected source files."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .collector import ScanError
from .logging import get_logger
from .models import Category, CategoryUsage, Occurrence

_logger = get_logger("extractor")


def read_source(path: Path) -> str:
    """Return the UTF-8 text of ``path``; any read failure is fatal for the run."""
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(f"Cannot read source file {path}: {exc}") from exc


def extract_usages(files: Sequence[Path], category: Category) -> CategoryUsage:
    """Record every ``i-<category>-<name>`` token in ``files`` for one category."""
    usage = CategoryUsage(category=category)
    for path in files:
        text = read_source(path)
        # Lines are split on "\n" only; a trailing "\r" never matches [\w-].
        for line_no, line in enumerate(text.split("\n"), start=1):
            for match in category.pattern.finditer(line):
                usage.record(match.group(1), Occurrence(path=path, line=line_no))

    _logger.debug(
        "Category %s: %d distinct icons referenced across %d files",
        category.name,
        len(usage.used_names),
        len(files),
    )
    return usage


__all__ = ["extract_usages", "read_source"]
