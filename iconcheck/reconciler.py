"""Cross-reference icon usages against the asset inventory."""

from __future__ import annotations

from typing import Dict, List, Sequence, Set

from .models import AssetInventory, CategoryUsage, Collision, MissingIcon, UnusedIcon


def find_missing(usage: CategoryUsage, inventory: AssetInventory) -> List[MissingIcon]:
    """Icons referenced under the category without an asset file, sorted by name."""
    missing = sorted(set(usage.used_names) - inventory.names)
    return [
        MissingIcon(
            category=usage.category.name,
            name=name,
            occurrences=tuple(usage.occurrences_for(name)),
        )
        for name in missing
    ]


def index_bare_names(usages: Sequence[CategoryUsage]) -> Dict[str, Set[str]]:
    """Map each referenced bare name to the categories it is referenced under."""
    index: Dict[str, Set[str]] = {}
    for usage in usages:
        for key in usage.occurrences:
            name = usage.category.bare_name(key)
            index.setdefault(name, set()).add(usage.category.name)
    return index


def find_collisions(usages: Sequence[CategoryUsage]) -> List[Collision]:
    """Bare names referenced under two or more categories, sorted by name."""
    by_category = {usage.category.name: usage for usage in usages}
    collisions: List[Collision] = []
    for name, categories in sorted(index_bare_names(usages).items()):
        if len(categories) < 2:
            continue
        ordered = tuple(sorted(categories))
        collisions.append(
            Collision(
                name=name,
                categories=ordered,
                occurrences={
                    category: tuple(by_category[category].occurrences_for(name))
                    for category in ordered
                },
            )
        )
    return collisions


def find_unused(usage: CategoryUsage, inventory: AssetInventory) -> List[UnusedIcon]:
    """Asset files of the category that are never referenced, sorted by name."""
    unused = sorted(inventory.names - set(usage.used_names))
    return [
        UnusedIcon(category=inventory.category, name=name, filename=inventory.filename(name))
        for name in unused
    ]


__all__ = ["find_collisions", "find_missing", "find_unused", "index_bare_names"]
