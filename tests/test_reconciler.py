"""Tests for iconcheck.reconciler."""

from __future__ import annotations

from pathlib import Path

import pytest

from iconcheck.models import AssetInventory, Category, CategoryUsage, Occurrence
from iconcheck.reconciler import find_collisions, find_missing, find_unused, index_bare_names


def _usage(category: str, *tokens: tuple[str, str, int]) -> CategoryUsage:
    usage = CategoryUsage(category=Category.from_name(category))
    for name, path, line in tokens:
        usage.record(name, Occurrence(Path(path), line))
    return usage


def _inventory(category: str, *names: str) -> AssetInventory:
    return AssetInventory(
        category=category,
        directory=Path("icons") / category,
        icon_extension=".svg",
        names=frozenset(names),
    )


def test_missing_and_unused_partition_the_difference() -> None:
    usage = _usage(
        "brand",
        ("zeta", "a.vue", 3),
        ("logo", "a.vue", 1),
        ("alpha", "b.ts", 7),
        ("zeta", "b.ts", 2),
    )
    inventory = _inventory("brand", "logo", "old", "archive")

    missing = find_missing(usage, inventory)
    unused = find_unused(usage, inventory)

    assert [icon.name for icon in missing] == ["alpha", "zeta"]
    assert missing[1].occurrences == (Occurrence(Path("a.vue"), 3), Occurrence(Path("b.ts"), 2))
    assert [icon.display_path for icon in unused] == ["brand/archive.svg", "brand/old.svg"]

    missing_names = {icon.name for icon in missing}
    unused_names = {icon.name for icon in unused}
    assert missing_names.isdisjoint(unused_names)
    assert missing_names.isdisjoint(inventory.names)
    assert missing_names <= set(usage.used_names)


def test_find_missing_is_case_sensitive() -> None:
    usage = _usage("brand", ("Logo", "a.vue", 1))

    missing = find_missing(usage, _inventory("brand", "logo"))

    assert [icon.name for icon in missing] == ["Logo"]


def test_collisions_require_two_categories() -> None:
    brand = _usage("brand", ("warning", "a.vue", 4), ("logo", "a.vue", 5))
    status = _usage("status", ("warning", "b.vue", 9), ("ok", "b.vue", 10))
    flags = _usage("flags", ("warning", "c.ts", 1))

    index = index_bare_names([brand, status, flags])
    collisions = find_collisions([status, brand, flags])

    assert index["warning"] == {"brand", "status", "flags"}
    assert index["logo"] == {"brand"}
    assert len(collisions) == 1
    collision = collisions[0]
    assert collision.name == "warning"
    assert collision.categories == ("brand", "flags", "status")
    assert collision.occurrences["brand"] == (Occurrence(Path("a.vue"), 4),)
    assert collision.occurrences["status"] == (Occurrence(Path("b.vue"), 9),)


def test_no_collisions_for_distinct_names() -> None:
    brand = _usage("brand", ("logo", "a.vue", 1))
    status = _usage("status", ("ok", "a.vue", 2))

    assert find_collisions([brand, status]) == []


def test_icon_keys_split_back_into_category_and_name() -> None:
    brand = _usage("brand", ("dark-sun", "a.ts", 1), ("logo", "a.ts", 2))
    brand_dark = _usage("brand-dark", ("sun", "a.ts", 1))

    for usage in (brand, brand_dark):
        for key in usage.occurrences:
            name = usage.category.bare_name(key)
            assert usage.category.key_for(name) == key
            assert name in usage.used_names

    assert index_bare_names([brand, brand_dark]) == {
        "dark-sun": {"brand"},
        "logo": {"brand"},
        "sun": {"brand-dark"},
    }


def test_bare_name_rejects_foreign_key() -> None:
    with pytest.raises(ValueError):
        Category.from_name("status").bare_name("i-brand-logo")
