"""Command-line entry point for building the site."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sitekit import config
from sitekit.exceptions import SitekitError
from sitekit.pipeline import BuildPlan, run_build


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sitekit-build",
        description="Minify site sources and copy static assets into a dist directory.",
    )
    parser.add_argument("--source", help="Site source directory (default: working directory)")
    parser.add_argument("--dist", help="Output directory (default: SITEKIT_DIST_DIR, else <source>/dist)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file operation")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    plan = BuildPlan.default()
    if args.source:
        plan.source_dir = Path(args.source).expanduser().resolve()
        if not config.SITEKIT_DIST_DIR_PINNED:
            plan.dist_dir = plan.source_dir / config.DEFAULT_DIST_DIR
    if args.dist:
        plan.dist_dir = Path(args.dist).expanduser().resolve()

    try:
        run_build(plan)
    except SitekitError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        return 1
    return 0
