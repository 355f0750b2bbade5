"""LOCAL-only CLI to print and sanity-check the HTTP status catalogue."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT.parent / "src"))

CHECK_FAILED_EXIT = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print every named HTTP status as '<code> <phrase>'.",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Render plain lines or a JSON array of status/statusText objects.",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Order by numeric code instead of declaration order.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate shapes and code uniqueness; exit 2 on any failure.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit debug logging on stderr.",
    )
    return parser.parse_args(argv)


def run_checks() -> bool:
    from literal_http_status.services.catalogue_index import (
        check_catalogue_shapes,
        find_duplicate_codes,
    )

    log = logging.getLogger("print_catalogue")
    shape_failures = check_catalogue_shapes()
    duplicates = find_duplicate_codes()
    for code, names in duplicates.items():
        log.error("Code %d is claimed by %s", code, ", ".join(names))
    return not shape_failures and not duplicates


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from literal_http_status.services.render import (
        RenderConfig,
        RenderFormat,
        render_catalogue,
    )

    config = RenderConfig(
        output_format=RenderFormat(args.format),
        sort_by_code=args.sort,
    )
    sys.stdout.write(render_catalogue(config))
    sys.stdout.write("\n")

    if args.check and not run_checks():
        return CHECK_FAILED_EXIT
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
