"""
Command-Line Interface for the degree audit reader.

MODES:
------
1. LIST: print every requirement of the audit, incomplete ones first
2. DETAILS: resolve the courses of selected requirements (--requirement ID
   or --all) through the catalog and print them with credit totals
3. COURSE: look up a single course (--course "CSE 2231")

Run from the project root:
    python3 -m degree_audit audit.html
    python3 -m degree_audit audit.html --requirement 3 --requirement 5
    python3 -m degree_audit audit.html --all --json
    python3 -m degree_audit --course "CSE 2231"
"""

import argparse
import logging
from pathlib import Path

from .exceptions import DocumentLoadError
from .reader import AuditReader


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="degree-audit",
        description="Make an exported degree audit readable and look up its courses in the catalog.",
    )
    parser.add_argument("audit", type=Path, nargs="?", help="Degree audit HTML file (saved from the browser)")
    parser.add_argument("-r", "--requirement", type=int, action="append", default=[], metavar="ID",
                        help="Resolve the courses of this requirement (repeatable)")
    parser.add_argument("--all", action="store_true", help="Resolve the courses of every requirement")
    parser.add_argument("--course", metavar="REF", help='Look up a single course, e.g. "CSE 2231"')
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    parser.add_argument("--concurrency", type=int, default=1,
                        help="Parallel catalog lookups per requirement (default: 1)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log catalog activity (-vv for debug)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.audit is None and not args.course:
        parser.error("an audit file is required unless --course is given")

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    reader = AuditReader(concurrency=args.concurrency)
    try:
        if args.course:
            reader.show_course(args.course, as_json=args.json)
            return 0

        try:
            requirements = reader.load(args.audit)
        except DocumentLoadError as e:
            reader.display.print_error(str(e))
            return 1

        if args.all:
            selected = requirements
        else:
            selected = []
            for req_id in args.requirement:
                req = reader.find_requirement(req_id)
                if req is None:
                    reader.display.print_error(f"No requirement with id {req_id}")
                    return 2
                selected.append(req)

        if selected:
            reader.show_details(selected, as_json=args.json)
        else:
            reader.show_requirements(as_json=args.json)
        return 0
    finally:
        reader.close()


if __name__ == "__main__":
    raise SystemExit(main())
