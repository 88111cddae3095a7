"""Render iconcheck findings as text or JSON Lines."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, TextIO

from .models import CheckReport, Occurrence


def format_location(occurrence: Occurrence, root: Path | None = None) -> str:
    """Return ``path:line``, relative to ``root`` when the file lives under it."""
    return f"{_display_path(occurrence.path, root)}:{occurrence.line}"


def _display_path(path: Path, root: Path | None) -> str:
    if root is not None:
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            pass
    return path.as_posix()


class TextReporter:
    """Human-readable report: missing per category, collisions, then unused icons."""

    def __init__(self, relative_to: Path | None = None) -> None:
        self.relative_to = relative_to

    def render(self, report: CheckReport) -> str:
        lines: List[str] = []
        for result in report.results:
            label = f'category "{result.category.name}"'
            if result.missing:
                lines.extend(["", f"❌ Missing icons in {label}:"])
                for icon in result.missing:
                    lines.extend(["", f'🔸 Icon "{icon.name}"'])
                    lines.extend(f"  ↪ {self._location(o)}" for o in icon.occurrences)
            else:
                lines.extend(["", f"✅ All icons in {label} are present."])

        lines.extend(["", "🔎 Icons used with more than one category:"])
        if report.collisions:
            for collision in report.collisions:
                lines.extend(
                    [
                        "",
                        f'⚠️  Icon "{collision.name}" is used in multiple categories: '
                        f"{', '.join(collision.categories)}",
                    ]
                )
                for category in collision.categories:
                    lines.extend(
                        f'  ↪ {self._location(o)} (category "{category}")'
                        for o in collision.occurrences[category]
                    )
        else:
            lines.append("✅ No icon is used with more than one category (prefix).")

        lines.extend(["", "🧹 Unused icon files:"])
        if report.unused:
            lines.extend(f"  - {icon.display_path}" for icon in report.unused)
        else:
            lines.append("✅ Every icon file is referenced.")

        return "\n".join(lines) + "\n"

    def write(self, report: CheckReport, stream: TextIO) -> None:
        stream.write(self.render(report))

    def _location(self, occurrence: Occurrence) -> str:
        return format_location(occurrence, self.relative_to)


class JsonReporter:
    """JSON Lines report with one record per finding and a trailing summary."""

    def __init__(self, relative_to: Path | None = None) -> None:
        self.relative_to = relative_to

    def records(self, report: CheckReport) -> Iterable[Dict[str, object]]:
        for icon in report.missing:
            yield {
                "kind": "missing",
                "category": icon.category,
                "icon": icon.name,
                "locations": self._locations(icon.occurrences),
            }
        for collision in report.collisions:
            yield {
                "kind": "collision",
                "icon": collision.name,
                "categories": list(collision.categories),
                "locations": {
                    category: self._locations(occurrences)
                    for category, occurrences in collision.occurrences.items()
                },
            }
        for unused in report.unused:
            yield {
                "kind": "unused",
                "category": unused.category,
                "icon": unused.name,
                "path": unused.display_path,
            }
        yield {
            "kind": "summary",
            "categories": [result.category.name for result in report.results],
            "source_files": report.source_files,
            "missing": len(report.missing),
            "collisions": len(report.collisions),
            "unused": len(report.unused),
        }

    def render(self, report: CheckReport) -> str:
        return "".join(
            json.dumps(record, ensure_ascii=False, sort_keys=True) + "\n"
            for record in self.records(report)
        )

    def write(self, report: CheckReport, stream: TextIO) -> None:
        stream.write(self.render(report))

    def _locations(self, occurrences: Sequence[Occurrence]) -> List[Dict[str, object]]:
        return [
            {"path": _display_path(o.path, self.relative_to), "line": o.line}
            for o in occurrences
        ]


REPORTERS = {
    "text": TextReporter,
    "json": JsonReporter,
}


def build_reporter(output_format: str, relative_to: Path | None = None) -> TextReporter | JsonReporter:
    try:
        factory = REPORTERS[output_format]
    except KeyError as exc:
        raise ValueError(f"Unknown output format: {output_format}") from exc
    return factory(relative_to=relative_to)


__all__ = ["JsonReporter", "TextReporter", "build_reporter", "format_location"]
