"""End-to-end tests for iconcheck.checker."""

from __future__ import annotations

import pytest

from iconcheck.checker import IconChecker, exit_code_for
from iconcheck.collector import SourceCollector
from iconcheck.config import ConfigError
from iconcheck.models import Occurrence
from iconcheck.reporter import TextReporter
from tests._fixtures.project_builder import ProjectBuilder

_LOGO_ON_LINE_5 = "<template>\n  <div>\n    <header>\n      <span>Home</span>\n      <i-brand-logo />\n"


def test_present_icon_is_reported_as_complete(project: ProjectBuilder) -> None:
    project.source("App.vue", _LOGO_ON_LINE_5)
    project.icons("brand", ["logo"])

    report = project.check()

    (result,) = report.results
    assert result.category.name == "brand"
    assert result.missing == []
    assert "logo" in result.usage.used_names
    assert not report.has_missing
    assert exit_code_for(report, project.config()) == 0


def test_missing_icon_lists_its_location(project: ProjectBuilder) -> None:
    source = project.source("App.vue", _LOGO_ON_LINE_5)
    project.icons("brand")

    report = project.check()

    (missing,) = report.missing
    assert missing.category == "brand"
    assert missing.name == "logo"
    assert missing.occurrences == (Occurrence(source, 5),)
    assert exit_code_for(report, project.config()) == 1


def test_collision_across_categories(project: ProjectBuilder) -> None:
    brand_file = project.source("Brand.vue", "<i-brand-warning />\n")
    status_file = project.source("status/Status.vue", "\n<i-status-warning />\n")
    project.icons("brand", ["warning"])
    project.icons("status", ["warning"])

    report = project.check()

    (collision,) = report.collisions
    assert collision.name == "warning"
    assert collision.categories == ("brand", "status")
    assert collision.occurrences["brand"] == (Occurrence(brand_file, 1),)
    assert collision.occurrences["status"] == (Occurrence(status_file, 2),)
    assert exit_code_for(report, project.config()) == 0


def test_unused_icon_is_listed_once(project: ProjectBuilder) -> None:
    project.source("App.vue", "<i-brand-logo />\n")
    project.icons("brand", ["logo", "unused-icon"])
    project.icons("status", [])

    report = project.check()

    assert [icon.display_path for icon in report.unused] == ["brand/unused-icon.svg"]


def test_fail_on_settings_turn_findings_into_failures(project: ProjectBuilder) -> None:
    project.write({".iconcheck.yml": "fail_on:\n  unused: true\n"})
    project.source("App.vue", "")
    project.icons("brand", ["orphan"])

    report = project.check()

    assert exit_code_for(report, project.config()) == 1


def test_missing_icon_root_is_fatal(tmp_path) -> None:
    root = tmp_path / "bare"
    (root / "resources" / "js").mkdir(parents=True)

    with pytest.raises(ConfigError):
        IconChecker().run(root)


def test_missing_source_root_is_fatal(project: ProjectBuilder) -> None:
    project.write({".iconcheck.yml": "source_root: src\n"})
    project.icons("brand", ["logo"])

    with pytest.raises(FileNotFoundError):
        project.check()


def test_repeated_runs_render_identical_output(project: ProjectBuilder) -> None:
    project.source("b/Second.vue", "i-status-x i-brand-y\n")
    project.source("a/First.ts", "i-brand-x\ni-status-y i-status-x\n")
    project.icons("brand", ["z"])
    project.icons("status", ["x"])

    reporter = TextReporter(relative_to=project.path())
    first = reporter.render(project.check())
    second = reporter.render(project.check())

    assert first == second


def test_injected_collector_controls_scanned_files(project: ProjectBuilder) -> None:
    project.source("App.vue", "<i-brand-missing />\n")
    tsx = project.source("Page.tsx", "<i-brand-logo />\n")
    project.icons("brand", ["logo"])

    report = IconChecker(collector=SourceCollector(extensions=[".tsx"])).run(project.path())

    assert report.source_files == 1
    assert report.missing == []
    assert report.results[0].usage.occurrences_for("logo") == [Occurrence(tsx, 1)]
