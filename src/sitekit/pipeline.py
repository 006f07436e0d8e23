"""Build pipeline: minify site sources and copy static assets into dist."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from sitekit import config
from sitekit.exceptions import BuildError
from sitekit.minify import minifier_for
from sitekit.schemas import BuildResult, CopyReport, FileReport

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]

_RULE = "=" * 50


@dataclass
class BuildPlan:
    """Inputs and output location for one build run.

    Attributes:
        source_dir: Directory all relative paths are resolved against.
        dist_dir: Output root; created when missing.
        js_files: Scripts to minify, relative to source_dir.
        css_files: Stylesheets to minify, relative to source_dir.
        html_files: Documents to minify, relative to source_dir.
        images_dir: Directory copied verbatim, relative to source_dir.
        extra_files: Auxiliary files copied verbatim when present.
    """

    source_dir: Path
    dist_dir: Path
    js_files: list[str] = field(default_factory=lambda: list(config.JS_FILES))
    css_files: list[str] = field(default_factory=lambda: list(config.CSS_FILES))
    html_files: list[str] = field(default_factory=lambda: list(config.HTML_FILES))
    images_dir: str = config.IMAGES_DIR
    extra_files: list[str] = field(default_factory=lambda: list(config.EXTRA_FILES))

    @classmethod
    def default(cls) -> BuildPlan:
        return cls(source_dir=config.SITEKIT_SOURCE_DIR, dist_dir=config.SITEKIT_DIST_DIR)


def run_build(plan: BuildPlan, *, echo: Echo = print) -> BuildResult:
    """Minify sources, copy assets, and report size savings.

    Args:
        plan: What to build and where to write it.
        echo: Sink for the human-readable report lines.

    Returns:
        Per-file reports plus aggregate source and output sizes.

    Raises:
        BuildError: On the first I/O failure; files already written are left
            in place.
    """
    _ensure_dir(plan.dist_dir)
    echo("Building artifacts...\n")
    result = BuildResult()

    for heading, files in (
        ("Minifying JavaScript...", plan.js_files),
        ("\nMinifying CSS...", plan.css_files),
        ("\nMinifying HTML...", plan.html_files),
    ):
        echo(heading)
        for relative in files:
            report = minify_asset(plan, relative)
            result.minified.append(report)
            echo(
                f"  ✓ {relative}: {report.original_size} → {report.minified_size} bytes "
                f"({report.reduction:.1f}% reduction)"
            )

    echo("\nCopying images...")
    for report in copy_images(plan):
        result.copied.append(report)
        echo(f"  ✓ {report.path.name}: {report.size} bytes")

    echo("\nCopying other files...")
    for report in copy_extra_files(plan):
        result.copied.append(report)
        echo(f"  ✓ {report.path}")

    result.source_size = sum(r.original_size for r in result.minified) + sum(
        r.size for r in result.copied
    )
    result.dist_size = directory_size(plan.dist_dir)
    _print_summary(result, plan, echo)
    return result


def minify_asset(plan: BuildPlan, relative: str | Path) -> FileReport:
    """Minify one source file into its mirrored path under dist_dir."""
    minify = minifier_for(relative)
    source = plan.source_dir / relative
    target = plan.dist_dir / relative
    try:
        text = source.read_text(encoding="utf-8")
        original_size = source.stat().st_size
        minified = minify(text)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(minified, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Failed to minify {source}: {exc}") from exc

    logger.debug("Minified %s into %s", source, target)
    return FileReport(
        path=Path(relative),
        original_size=original_size,
        minified_size=len(minified.encode("utf-8")),
    )


def copy_images(plan: BuildPlan) -> list[CopyReport]:
    """Copy every file under the images directory byte-for-byte."""
    images = plan.source_dir / plan.images_dir
    if not images.is_dir():
        raise BuildError(f"Images directory not found: {images}")

    reports: list[CopyReport] = []
    for source in sorted(path for path in images.rglob("*") if path.is_file()):
        relative = source.relative_to(plan.source_dir)
        reports.append(_copy(source, plan.dist_dir / relative, relative))
    return reports


def copy_extra_files(plan: BuildPlan) -> list[CopyReport]:
    """Copy auxiliary files such as LICENSE, skipping any that are absent."""
    reports: list[CopyReport] = []
    for name in plan.extra_files:
        source = plan.source_dir / name
        if not source.is_file():
            logger.debug("Skipping missing extra file %s", source)
            continue
        reports.append(_copy(source, plan.dist_dir / name, Path(name)))
    return reports


def directory_size(path: Path) -> int:
    """Total size in bytes of all files below a directory."""
    try:
        return sum(item.stat().st_size for item in path.rglob("*") if item.is_file())
    except OSError as exc:
        raise BuildError(f"Failed to measure {path}: {exc}") from exc


def _copy(source: Path, target: Path, relative: Path) -> CopyReport:
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        size = source.stat().st_size
    except OSError as exc:
        raise BuildError(f"Failed to copy {source}: {exc}") from exc
    logger.debug("Copied %s into %s", source, target)
    return CopyReport(path=relative, size=size)


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildError(f"Failed to create {path}: {exc}") from exc


def _print_summary(result: BuildResult, plan: BuildPlan, echo: Echo) -> None:
    echo("\n" + _RULE)
    echo("Build Summary")
    echo(_RULE)
    echo(f"Source size: {result.source_size / 1024:.2f} KB")
    echo(f"Dist size:   {result.dist_size / 1024:.2f} KB")
    echo(f"Reduction:   {result.reduction:.1f}%")
    echo(f"\n✓ Build complete! Artifacts in {plan.dist_dir}")
