#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

try:
    import hcl2  # noqa: F401
except ImportError:
    print("ERROR: python-hcl2 not installed. `pip install python-hcl2`", file=sys.stderr)
    sys.exit(2)

from .analyze import analyze
from .errors import ConfigurationError
from .logs import log
from .report import render_json, render_text
from .sources import IGNORELIST_FILE, load_ignorelist

# --- Config
DEFAULT_ENVIRONMENTS_ROOT = "environments"
DEFAULT_MODULES_ROOT = "modules"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terraform-module-drift",
        description="Find pass-through variables and undeclared module inputs",
    )
    parser.add_argument("--environments-root", default=DEFAULT_ENVIRONMENTS_ROOT,
                        help="Directory whose subdirectories are environments")
    parser.add_argument("--modules-root", default=DEFAULT_MODULES_ROOT,
                        help="Directory whose subdirectories are modules")
    parser.add_argument("--ignore-file", default=IGNORELIST_FILE,
                        help="Variable names to leave out of the findings, one per line")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument("--verbose", action="store_true",
                        help="Also show declared, used and referenced sets per environment")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    environments_root = Path(args.environments_root)
    modules_root = Path(args.modules_root)
    log(f"🚀 Starting module drift analysis of {environments_root} against {modules_root}")

    ignore = load_ignorelist(Path(args.ignore_file))
    try:
        reports = analyze(environments_root, modules_root, ignore)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    render = render_json if args.format == "json" else render_text
    sys.stdout.write(render(reports, verbose=args.verbose))

    if not any(r.has_findings for r in reports):
        log("✅ No variable drift detected.")
        return 0
    if args.format == "text":
        print(f"\n💡 Tip: add acceptable pass-through vars to {args.ignore_file} (one per line).")
    return 1


if __name__ == "__main__":
    sys.exit(main())
