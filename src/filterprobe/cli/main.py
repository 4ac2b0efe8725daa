"""CLI entrypoint for filterprobe."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from filterprobe import __version__
from filterprobe.config import load_config
from filterprobe.constants.branding import CLI_DESCRIPTION
from filterprobe.constants.config import EXIT_CONFIG_ERROR, EXIT_FAILURE, EXIT_OK
from filterprobe.constants.reporting import OUTPUT_FORMAT_JSON, OUTPUT_FORMAT_TEXT, VALID_OUTPUT_FORMATS
from filterprobe.exceptions import ConfigError, FilterProbeError
from filterprobe.pipeline import QueryOptions, query_extension
from filterprobe.reporting import StdoutReporter, render_json


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="filterprobe",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    query = subparsers.add_parser(
        "query-ext",
        help="Match a URL against the filter engines bundled in an extension build",
    )
    query.add_argument(
        "-a",
        "--artifact",
        default=None,
        help="Artifact URL (http(s):// or file://); defaults to the newest chromium release build",
    )
    query.add_argument("-s", "--source-url", default=None, help="URL of the page issuing the request")
    query.add_argument(
        "-e",
        "--env",
        default="",
        help="Environment tokens, e.g. 'chromium', 'firefox-mobile' (substring matched)",
    )
    query.add_argument("--skip-regionals", action="store_true", help="Skip regional (lang) rule assets")
    query.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    query.add_argument("--cache-dir", type=Path, default=None, help="Cache directory (overrides config)")
    query.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=OUTPUT_FORMAT_TEXT,
        help="Output format (default: text)",
    )
    query.add_argument("--no-color", action="store_true", help="Disable colored output")
    query.add_argument("-v", "--verbose", action="store_true", help="Show debug logs and per-asset details")
    query.add_argument("url", help="Target URL to match")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command != "query-ext":
        parser.error(f"Unsupported command: {args.command}")

    return _handle_query_ext(args)


def _handle_query_ext(args: argparse.Namespace) -> int:
    """Run ``query-ext`` and print its report."""
    try:
        config = load_config(Path.cwd(), args.config)
        if args.cache_dir is not None:
            config = replace(config, cache_dir=args.cache_dir.resolve())
        report = query_extension(
            QueryOptions(
                url=args.url,
                artifact=args.artifact,
                source_url=args.source_url,
                env=args.env,
                skip_regionals=args.skip_regionals,
            ),
            config,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except FilterProbeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.output_format == OUTPUT_FORMAT_JSON:
        print(render_json(report))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(report, color=use_color, verbose=args.verbose).render())
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
