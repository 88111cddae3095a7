"""Core data models shared across iconcheck components."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple

REFERENCE_PREFIX = "i-"


@dataclass(frozen=True)
class Category:
    """Icon namespace backed by one subdirectory of the icon asset root."""

    name: str
    prefix: str
    pattern: re.Pattern[str]

    @classmethod
    def from_name(cls, name: str) -> "Category":
        prefix = f"{REFERENCE_PREFIX}{name}-"
        pattern = re.compile(rf"{re.escape(prefix)}([\w-]+)", re.ASCII)
        return cls(name=name, prefix=prefix, pattern=pattern)

    def key_for(self, bare_name: str) -> str:
        """Return the IconKey for ``bare_name`` within this category."""
        return f"{self.prefix}{bare_name}"

    def bare_name(self, key: str) -> str:
        if not key.startswith(self.prefix):
            raise ValueError(f"Icon key {key!r} does not belong to category {self.name!r}")
        return key[len(self.prefix):]


@dataclass(frozen=True)
class Occurrence:
    """Location of a reference token in a source file (1-based line)."""

    path: Path
    line: int


@dataclass
class CategoryUsage:
    """Usage index of a single category, built by the extractor."""

    category: Category
    occurrences: Dict[str, List[Occurrence]] = field(default_factory=dict)
    used_names: List[str] = field(default_factory=list)

    def record(self, bare_name: str, occurrence: Occurrence) -> None:
        key = self.category.key_for(bare_name)
        if key not in self.occurrences:
            self.occurrences[key] = []
            self.used_names.append(bare_name)
        self.occurrences[key].append(occurrence)

    def occurrences_for(self, bare_name: str) -> List[Occurrence]:
        return list(self.occurrences.get(self.category.key_for(bare_name), []))


@dataclass(frozen=True)
class AssetInventory:
    """Icon files that exist on disk for one category."""

    category: str
    directory: Path
    icon_extension: str
    names: FrozenSet[str] = frozenset()

    def filename(self, bare_name: str) -> str:
        return f"{bare_name}{self.icon_extension}"


@dataclass(frozen=True)
class MissingIcon:
    """Icon referenced in source without a matching asset file."""

    category: str
    name: str
    occurrences: Tuple[Occurrence, ...]


@dataclass(frozen=True)
class Collision:
    """Bare icon name referenced under two or more categories."""

    name: str
    categories: Tuple[str, ...]
    occurrences: Dict[str, Tuple[Occurrence, ...]]


@dataclass(frozen=True)
class UnusedIcon:
    """Asset file that no reference token points at."""

    category: str
    name: str
    filename: str

    @property
    def display_path(self) -> str:
        return f"{self.category}/{self.filename}"


@dataclass
class CategoryResult:
    """Per-category outcome of the reconciliation pass."""

    category: Category
    inventory: AssetInventory
    usage: CategoryUsage
    missing: List[MissingIcon]


@dataclass
class CheckReport:
    """Complete findings of one iconcheck run."""

    root: Path
    source_files: int
    results: List[CategoryResult]
    collisions: List[Collision]
    unused: List[UnusedIcon]

    @property
    def missing(self) -> List[MissingIcon]:
        return [icon for result in self.results for icon in result.missing]

    @property
    def has_missing(self) -> bool:
        return any(result.missing for result in self.results)

    @property
    def has_collisions(self) -> bool:
        return bool(self.collisions)

    @property
    def has_unused(self) -> bool:
        return bool(self.unused)
