"""Prowl CLI — prowl check / prowl path / prowl sitemap.

Entry point for the ``prowl`` command-line interface.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the prowl CLI."""
    parser = argparse.ArgumentParser(
        prog="prowl",
        description="Validate the navigation graph of a declared route set.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # prowl check
    check_parser = subparsers.add_parser(
        "check",
        help="Validate reachability, dead-ends, cycles and depth",
    )
    _add_common(check_parser)
    check_parser.add_argument(
        "--allow", action="append", default=None, metavar="PATH",
        help="Allowed terminal page (repeatable)",
    )
    check_parser.add_argument(
        "--strict-links", action="store_const", const=True, default=None,
        help="Warn about links declared by only one endpoint",
    )
    check_parser.add_argument(
        "--min-score", type=float, default=None,
        help="Fail when the health score is below this value",
    )
    check_parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    check_parser.add_argument(
        "--watch", action="store_true", help="Re-validate when declarations change",
    )

    # prowl path
    path_parser = subparsers.add_parser(
        "path",
        help="Show the shortest link path between two routes",
    )
    path_parser.add_argument("source", help="Starting route path")
    path_parser.add_argument("target", help="Destination route path")
    _add_common(path_parser)

    # prowl sitemap
    sitemap_parser = subparsers.add_parser(
        "sitemap",
        help="Write sitemap.xml for reachable routes",
    )
    _add_common(sitemap_parser)
    sitemap_parser.add_argument("--base-url", default=None, help="Base URL for sitemap entries")
    sitemap_parser.add_argument("--output", default="sitemap.xml", help="Output file")

    return parser


def _add_common(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every subcommand."""
    parser.add_argument("--root", default=".", help="Project directory")
    parser.add_argument("--manifest", default=None, help="Route manifest file")
    parser.add_argument("--root-path", default=None, help="URL path of the application root")
    parser.add_argument(
        "--case-sensitive", action="store_const", const=True, default=None,
        help="Keep letter case when comparing paths",
    )


def _get_version() -> str:
    """Get the package version."""
    from prowl import __version__

    return __version__


def _overrides(args: argparse.Namespace) -> dict[str, object]:
    """Config overrides from CLI flags; unset flags stay None."""
    overrides: dict[str, object] = {
        "manifest": args.manifest,
        "root_path": args.root_path,
        "case_sensitive": args.case_sensitive,
    }
    if args.command == "check":
        overrides["allowed_terminals"] = args.allow
        overrides["strict_links"] = args.strict_links
        overrides["min_score"] = args.min_score
    elif args.command == "sitemap":
        overrides["base_url"] = args.base_url
    return overrides


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)
    if args.command == "check" and args.watch and (args.json or args.min_score is not None):
        parser.error("check --watch cannot be combined with --json or --min-score")

    from prowl._errors import ProwlError

    try:
        status = _dispatch(args)
    except ProwlError as exc:
        if getattr(args, "json", False):
            print(json.dumps({"errors": [exc.to_dict()]}, indent=2, sort_keys=True))
        else:
            from prowl.banner import print_error

            print_error(exc, args.root)
        status = 1
    sys.exit(status)


def _dispatch(args: argparse.Namespace) -> int:
    from prowl.app import check_config, export_sitemap, find_path, watch
    from prowl.banner import print_report
    from prowl.config_loader import load_config

    overrides = _overrides(args)

    if args.command == "check":
        if args.watch:
            watch(args.root, **overrides)
            return 0
        config = load_config(Path(args.root), **overrides)
        result = check_config(config, quiet=True)
        if args.json:
            print(result.to_json())
        else:
            print_report(result, config.manifest_path)
        return 1 if result.health_score < config.min_score else 0

    if args.command == "path":
        route = find_path(args.root, args.source, args.target, **overrides)
        if route is None:
            print(f"No path from {args.source} to {args.target}", file=sys.stderr)
            return 1
        print(" -> ".join(route))
        return 0

    if args.command == "sitemap":
        size = export_sitemap(args.root, args.output, **overrides)
        return 0 if size is not None else 1

    return 2


if __name__ == "__main__":
    main()
