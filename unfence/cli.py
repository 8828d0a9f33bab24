"""CLI entrypoint for unfence."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, load_config
from .extractor import DEFAULT_FENCE, Extractor
from .logging import configure_logging
from .prompting import render_instructions
from .runner import InputNotFoundError, run_from_file

DEFAULT_INPUT = "example-input.txt"
DEFAULT_OUT_DIR = "."


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unfence",
        description="Write the `file:`-marked fenced blocks of a text document to disk.",
        epilog=render_instructions(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Defaults are applied after config merging, so unset options stay None here.
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        help=f"Input file path (defaults to {DEFAULT_INPUT}).",
    )
    parser.add_argument(
        "-o",
        "--out-dir",
        default=None,
        help="Output base directory (defaults to current directory).",
    )
    parser.add_argument(
        "--fence",
        default=None,
        help=f"Code fence delimiter to look for (defaults to {DEFAULT_FENCE}).",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding for the input and written files (defaults to utf-8).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Report which files would be created without writing anything.",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="Continue with the remaining files when one cannot be written.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Path to a {CONFIG_FILENAME} settings file.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log lines to this file.",
    )
    parser.add_argument(
        "--print-prompt",
        action="store_true",
        help="Print the LLM instruction snippet for the selected fence and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def _pick(cli_value, config_value, default):
    if cli_value is not None:
        return cli_value
    if config_value is not None:
        return config_value
    return default


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for unfence."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    try:
        configure_logging(
            verbose=bool(args.verbose),
            log_file=_pick(args.log_file, config.resolve(config.log_file), None),
        )
    except OSError as exc:
        parser.exit(1, f"unfence: cannot open log file: {exc}\n")

    fence = _pick(args.fence, config.fence, DEFAULT_FENCE)

    if args.print_prompt:
        print(render_instructions(fence), end="")
        return

    try:
        extractor = Extractor(fence)
    except ValueError as exc:
        parser.exit(2, f"unfence: {exc}\n")

    try:
        summary = run_from_file(
            _pick(args.input, config.resolve(config.input), DEFAULT_INPUT),
            _pick(args.out_dir, config.resolve(config.out_dir), DEFAULT_OUT_DIR),
            extractor=extractor,
            encoding=_pick(args.encoding, config.encoding, "utf-8"),
            dry_run=bool(_pick(args.dry_run, config.dry_run, False)),
            keep_going=bool(_pick(args.keep_going, config.keep_going, False)),
        )
    except InputNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (OSError, UnicodeError, LookupError) as exc:
        parser.exit(1, f"unfence failed: {exc}\nRun with --verbose for more details.\n")

    if summary.failed:
        parser.exit(1, f"{summary.failed} of {summary.extracted} files could not be written\n")


if __name__ == "__main__":
    main(sys.argv[1:])
