"""Pipeline orchestration for an icon consistency check."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .categories import discover_categories
from .collector import SourceCollector
from .config import IconCheckConfig, load_config
from .extractor import extract_usages
from .inventory import load_inventory
from .logging import get_logger
from .models import CategoryResult, CategoryUsage, CheckReport, UnusedIcon
from .reconciler import find_collisions, find_missing, find_unused


class IconChecker:
    """Runs discovery, collection, extraction and reconciliation for one project."""

    def __init__(self, collector: SourceCollector | None = None) -> None:
        self._collector = collector
        self.logger = get_logger("checker")

    def run(self, path: str | Path, config: IconCheckConfig | None = None) -> CheckReport:
        """Check the project at ``path`` and return its complete findings.

        Nothing is rendered here; fatal errors propagate before a report exists.
        """
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        if not root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")

        if config is None:
            config = load_config(root)
        self.logger.info("Checking icon usage in %s", root)

        categories = discover_categories(config.icon_root)
        collector = self._collector or SourceCollector(
            extensions=config.extensions,
            exclude_paths=config.exclude_paths,
        )
        files = collector.collect(config.source_root)

        results: List[CategoryResult] = []
        usages: List[CategoryUsage] = []
        unused: List[UnusedIcon] = []
        for category in categories:
            usage = extract_usages(files, category)
            inventory = load_inventory(
                config.icon_root / category.name,
                config.icon_extension,
                category=category.name,
            )
            missing = find_missing(usage, inventory)
            if missing:
                self.logger.debug(
                    "Category %s is missing %d icons", category.name, len(missing)
                )
            results.append(
                CategoryResult(
                    category=category,
                    inventory=inventory,
                    usage=usage,
                    missing=missing,
                )
            )
            usages.append(usage)
            unused.extend(find_unused(usage, inventory))

        collisions = find_collisions(usages)
        self.logger.debug(
            "Found %d missing, %d colliding and %d unused icons",
            sum(len(result.missing) for result in results),
            len(collisions),
            len(unused),
        )
        return CheckReport(
            root=root,
            source_files=len(files),
            results=results,
            collisions=collisions,
            unused=unused,
        )


def exit_code_for(report: CheckReport, config: IconCheckConfig) -> int:
    """Return 1 when the report contains findings that should fail the run."""
    if report.has_missing:
        return 1
    if config.fail_on.collisions and report.has_collisions:
        return 1
    if config.fail_on.unused and report.has_unused:
        return 1
    return 0


__all__ = ["IconChecker", "exit_code_for"]
