"""Source file collection for the usage extractor."""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import DEFAULT_EXTENSIONS
from .logging import get_logger


class ScanError(RuntimeError):
    """Raised when a directory or source file cannot be read during a run."""


@dataclass
class IgnoreRule:
    """Gitignore-style exclusion pattern relative to the source root."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            return fnmatchcase(rel_path, self.pattern)

        return fnmatchcase(rel_path.rsplit("/", 1)[-1], self.pattern)


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern or pattern.startswith("#"):
        return None

    negate = pattern.startswith("!")
    if negate:
        pattern = pattern[1:]

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


class SourceCollector:
    """Walks the source tree depth-first and keeps files with accepted extensions."""

    def __init__(
        self,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        exclude_paths: Iterable[str] = (),
    ) -> None:
        self.extensions = frozenset(extensions)
        self.rules = [
            rule for rule in (build_ignore_rule(pattern) for pattern in exclude_paths) if rule
        ]
        self.logger = get_logger("collector")

    def collect(self, source_root: Path) -> List[Path]:
        """Return matching files under ``source_root`` in sorted depth-first order."""
        if not source_root.exists():
            raise FileNotFoundError(f"Source root not found: {source_root}")
        if not source_root.is_dir():
            raise NotADirectoryError(f"Source root is not a directory: {source_root}")

        files: List[Path] = []
        self._walk(source_root, "", files)
        self.logger.debug(
            "Collected %d source files (%s) under %s",
            len(files),
            ", ".join(sorted(self.extensions)),
            source_root,
        )
        return files

    def _walk(self, directory: Path, rel_dir: str, files: List[Path]) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            raise ScanError(f"Cannot read directory {directory}: {exc}") from exc

        for entry in entries:
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            is_dir = entry.is_dir()
            if self.rules and _should_ignore(rel_path, is_dir, self.rules):
                self.logger.debug("Skipping excluded path %s", rel_path)
                continue
            if is_dir:
                self._walk(entry, rel_path, files)
            elif entry.suffix in self.extensions:
                files.append(entry)


__all__ = ["IgnoreRule", "ScanError", "SourceCollector", "build_ignore_rule"]
