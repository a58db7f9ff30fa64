"""
Command-line interface for maintaining translation catalogs.

Examples:
    i18n-manager add home.title en:Welcome fr:Bienvenue
    i18n-manager update home.title en:Hello fr:Bonjour
    i18n-manager get home.title
    i18n-manager check home.title
    i18n-manager list
    i18n-manager sort
    i18n-manager validate
    i18n-manager missing
    i18n-manager --root=/path/to/project list
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from i18n_manager.core.config import get_settings
from i18n_manager.core.errors import CatalogError
from i18n_manager.core.logging_config import setup_logging
from i18n_manager.services.catalog_service import CatalogService
from i18n_manager.utils.json_io import render_value

log = logging.getLogger(__name__)


def _translation_pair(text: str) -> tuple[str, str]:
    """Parse ``lang:value``; only the first colon separates."""
    if ":" not in text:
        raise argparse.ArgumentTypeError(f"expected <lang>:<value>, got {text!r}")
    lang, value = text.split(":", 1)
    return lang, value


def handle_add(service: CatalogService, args: argparse.Namespace) -> int:
    service.add(args.key, dict(args.translations))
    print("Translation added successfully")
    return 0


def handle_update(service: CatalogService, args: argparse.Namespace) -> int:
    service.update(args.key, dict(args.translations))
    print("Translation updated successfully")
    return 0


def handle_get(service: CatalogService, args: argparse.Namespace) -> int:
    translations = service.get(args.key)
    if not translations:
        return 1
    for lang, value in translations.items():
        print(f"{lang}:{render_value(value)}")
    return 0


def handle_check(service: CatalogService, args: argparse.Namespace) -> int:
    if service.exists(args.key):
        print("exists")
        return 0
    return 1


def handle_list(service: CatalogService, _: argparse.Namespace) -> int:
    for line in service.list_all():
        print(line)
    return 0


def handle_sort(service: CatalogService, _: argparse.Namespace) -> int:
    for outcome in service.sort_all():
        print(outcome)
    return 0


def handle_validate(service: CatalogService, _: argparse.Namespace) -> int:
    issues = service.validate_all()
    if issues:
        for issue in issues:
            print(issue, file=sys.stderr)
        return 1
    log.info("All JSON files are valid")
    return 0


def handle_missing(service: CatalogService, _: argparse.Namespace) -> int:
    missing = service.find_missing()
    for entry in missing:
        print(entry)
    return 1 if missing else 0


def build_parser() -> argparse.ArgumentParser:
    # Shared by the top-level parser and every sub-command so that --root is
    # accepted before or after the action name.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--root",
        default=argparse.SUPPRESS,
        help="Project root containing the catalog directory (defaults to cwd)",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging on stderr",
    )

    parser = argparse.ArgumentParser(
        prog="i18n-manager",
        description="Manage nested JSON translation catalogs",
        parents=[common],
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add_parser = sub.add_parser("add", parents=[common], help="Add a new key to every catalog")
    add_parser.add_argument("key", help="Dot-separated key path, e.g. home.title")
    add_parser.add_argument("translations", nargs="*", type=_translation_pair, metavar="lang:value")
    add_parser.set_defaults(func=handle_add)

    update_parser = sub.add_parser("update", parents=[common], help="Overwrite a key in every catalog")
    update_parser.add_argument("key")
    update_parser.add_argument("translations", nargs="*", type=_translation_pair, metavar="lang:value")
    update_parser.set_defaults(func=handle_update)

    get_parser = sub.add_parser("get", parents=[common], help="Print a key's value per language")
    get_parser.add_argument("key")
    get_parser.set_defaults(func=handle_get)

    check_parser = sub.add_parser("check", parents=[common], help="Exit 0 if the key exists anywhere")
    check_parser.add_argument("key")
    check_parser.set_defaults(func=handle_check)

    list_parser = sub.add_parser("list", parents=[common], help="List every key with its translations")
    list_parser.set_defaults(func=handle_list)

    sort_parser = sub.add_parser("sort", parents=[common], help="Rewrite catalogs with sorted keys")
    sort_parser.set_defaults(func=handle_sort)

    validate_parser = sub.add_parser("validate", parents=[common], help="Check that catalogs parse as JSON")
    validate_parser.set_defaults(func=handle_validate)

    missing_parser = sub.add_parser("missing", parents=[common], help="Report keys absent from some catalogs")
    missing_parser.set_defaults(func=handle_missing)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if getattr(args, "verbose", False) else settings.LOG_LEVEL)
    service = CatalogService.from_settings(settings, root=getattr(args, "root", None))
    log.debug("Catalog directory: %s", service.store.directory)

    try:
        service.store.ensure_directory()
        return args.func(service, args)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
