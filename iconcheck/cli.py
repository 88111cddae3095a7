"""CLI entrypoint for iconcheck."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .checker import IconChecker, exit_code_for
from .collector import ScanError
from .config import OUTPUT_FORMATS, ConfigError, load_config
from .logging import configure_logging, get_logger
from .reporter import build_reporter

EXIT_FATAL = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconcheck",
        description=(
            "Verify that icons referenced as i-<category>-<name> exist as asset files, "
            "and report icons used under several categories or never used at all."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "--source-root",
        help="Directory scanned for icon references (default: resources/js).",
    )
    parser.add_argument(
        "--icon-root",
        help="Directory holding one subdirectory per icon category (default: resources/assets/icons).",
    )
    parser.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        metavar="SUFFIX",
        help="Source file suffix to scan; repeat for several (default: .vue and .ts).",
    )
    parser.add_argument(
        "--icon-ext",
        dest="icon_extension",
        metavar="SUFFIX",
        help="Suffix of icon asset files (default: .svg).",
    )
    parser.add_argument(
        "--exclude",
        dest="exclude_paths",
        action="append",
        metavar="PATTERN",
        help="Gitignore-style pattern, relative to the source root, to skip while scanning.",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Report format written to stdout (default: text).",
    )
    parser.add_argument(
        "--fail-on-collisions",
        action="store_true",
        help="Exit with status 1 when an icon is used under more than one category.",
    )
    parser.add_argument(
        "--fail-on-unused",
        action="store_true",
        help="Exit with status 1 when an icon file is never referenced.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write debug logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for iconcheck."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(EXIT_FATAL, f"iconcheck: cannot open log file {args.log_file}: {exc}\n")
    logger = get_logger("cli")

    root = Path(args.path).expanduser()
    try:
        if not root.is_dir():
            raise FileNotFoundError(f"Project path not found: {args.path}")
        config = load_config(root).with_overrides(
            source_root=args.source_root,
            icon_root=args.icon_root,
            extensions=args.extensions,
            icon_extension=args.icon_extension,
            exclude_paths=args.exclude_paths,
            output_format=args.output_format,
            fail_on_collisions=args.fail_on_collisions,
            fail_on_unused=args.fail_on_unused,
        )
        report = IconChecker().run(root, config)
    except (ConfigError, FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(EXIT_FATAL, f"iconcheck: {exc}\n")
    except ScanError as exc:
        logger.debug("Scan aborted", exc_info=True)
        parser.exit(
            EXIT_FATAL,
            f"iconcheck failed: {exc}\nRun with --verbose for more details.\n",
        )

    reporter = build_reporter(config.output_format, relative_to=report.root)
    reporter.write(report, sys.stdout)
    sys.stdout.flush()

    status = exit_code_for(report, config)
    if status:
        parser.exit(status)


if __name__ == "__main__":
    main(sys.argv[1:])
