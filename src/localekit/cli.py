"""CLI entrypoint for localekit."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from localekit.config import AppConfig, load_config
from localekit.errors import ResolutionError
from localekit.io import language_to_json, load_area_languages, to_json, write_json
from localekit.languages import CurrentLanguageResolver, LanguageRegistry, parse_identifier
from localekit.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="localekit",
        description="Language registry with locale fallback resolution.",
    )
    parser.add_argument(
        "--languages",
        default=None,
        help="Language definitions file (TOML or JSON). Defaults to the configured file.",
    )
    subparsers = parser.add_subparsers(dest="command")

    list_cmd = subparsers.add_parser("list", help="List the languages of an area")
    _add_area_argument(list_cmd)
    list_cmd.add_argument("--all", action="store_true", help="Include inactive languages")
    list_cmd.add_argument("--column", default=None, help="Print only this attribute")
    list_cmd.add_argument(
        "--index-by",
        default=None,
        help="Key the --column output by this attribute",
    )
    list_cmd.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )

    get_cmd = subparsers.add_parser("get", help="Look up a language by locale, key, slug or id")
    _add_area_argument(get_cmd)
    get_cmd.add_argument("identifier", help="Locale, key, slug or numeric id")
    get_cmd.add_argument(
        "--no-fallback",
        action="store_true",
        help="Fail instead of returning the fallback or default language",
    )

    resolve_cmd = subparsers.add_parser("resolve", help="Resolve the current language")
    _add_area_argument(resolve_cmd)
    resolve_cmd.add_argument("identifier", help="Requested locale, key, slug or numeric id")
    resolve_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Fail if the requested language is missing or inactive",
    )

    fallbacks_cmd = subparsers.add_parser("fallbacks", help="Show the resolved fallback map")
    _add_area_argument(fallbacks_cmd)
    fallbacks_cmd.add_argument(
        "--index-by",
        default="locale",
        choices=["locale", "key", "id", "slug"],
        help="Attribute used for both sides of the map (default: locale)",
    )

    serve = subparsers.add_parser("serve", help="Run the localekit HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def _add_area_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("--area", default="default", help="Language area (default: default)")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    configure_logging(config.log_level, json_logs=config.log_json)

    if args.command == "serve":
        return _serve(args, config)

    if args.command == "list" and args.index_by and not args.column:
        parser.error("--index-by requires --column")

    languages = _load_registry(args, config)
    if languages is None:
        return 1

    if args.command == "list":
        if args.column:
            column = languages.column(args.column, args.index_by, active_only=not args.all)
            print(json.dumps(column, indent=2, ensure_ascii=False))
            return 0
        selected = languages.all(active_only=not args.all)
        if args.output:
            write_json(selected, args.output)
            print(f"Wrote {len(selected)} languages to {args.output}")
            return 0
        print(to_json(selected))
        return 0

    if args.command == "get":
        language = languages.get(parse_identifier(args.identifier), fallback=not args.no_fallback)
        if language is None:
            print(f"Language not found: {args.identifier}", file=sys.stderr)
            return 1
        print(language_to_json(language))
        return 0

    if args.command == "resolve":
        requested = parse_identifier(args.identifier).value
        resolver = CurrentLanguageResolver(requested, allow_fallback_to_default=not args.strict)
        try:
            language = resolver.resolve(languages)
        except ResolutionError as exc:
            print(f"{exc} (requested: {exc.requested})", file=sys.stderr)
            return 1
        print(language_to_json(language))
        return 0

    if args.command == "fallbacks":
        print(json.dumps(languages.fallbacks(args.index_by), indent=2, ensure_ascii=False))
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _load_registry(args: argparse.Namespace, config: AppConfig) -> LanguageRegistry | None:
    path = args.languages or config.languages_path
    try:
        area_languages = load_area_languages(path)
    except OSError as exc:
        print(f"Cannot read language definitions: {exc}", file=sys.stderr)
        return None
    except ValueError as exc:
        # Covers ConfigurationError, pydantic ValidationError and TOML/JSON decode errors.
        print(f"Invalid language definitions in {path}: {exc}", file=sys.stderr)
        return None
    languages = area_languages.get(args.area)
    if languages is None:
        available = ", ".join(area_languages.areas()) or "none"
        print(f"Unknown area: {args.area} (available: {available})", file=sys.stderr)
    return languages


def _serve(args: argparse.Namespace, config: AppConfig) -> int:
    try:
        import uvicorn
    except ModuleNotFoundError:
        print(
            "`localekit serve` requires uvicorn. Install project dependencies first.",
            file=sys.stderr,
        )
        return 1

    host = args.host or config.api_host
    port = args.port or config.api_port
    uvicorn.run(
        "localekit.api:app",
        host=host,
        port=port,
        workers=config.workers,
        reload=False,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
