"""Tests for the build pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitekit.exceptions import BuildError
from sitekit.pipeline import BuildPlan, copy_extra_files, copy_images, minify_asset, run_build
from sitekit.schemas import FileReport


@pytest.fixture
def plan(site_dir: Path, tmp_path: Path) -> BuildPlan:
    return BuildPlan(source_dir=site_dir, dist_dir=tmp_path / "out")


class TestMinifyAsset:
    """Tests for minify_asset."""

    def test_writes_mirrored_path(self, plan: BuildPlan) -> None:
        """Output lands under dist_dir with parent directories created."""
        report = minify_asset(plan, "javascripts/main.js")

        target = plan.dist_dir / "javascripts" / "main.js"
        assert target.read_text(encoding="utf-8") == "function add(a,b){return a + b}"
        assert report.path == Path("javascripts/main.js")
        assert report.original_size == (plan.source_dir / "javascripts" / "main.js").stat().st_size
        assert report.minified_size == len("function add(a,b){return a + b}")
        assert 0 < report.reduction < 100

    def test_missing_source_raises_build_error(self, plan: BuildPlan) -> None:
        with pytest.raises(BuildError, match="missing.css"):
            minify_asset(plan, "stylesheets/missing.css")

    def test_undecodable_source_raises_build_error(self, plan: BuildPlan) -> None:
        """A non-UTF-8 source is reported as a build failure, not a decode crash."""
        (plan.source_dir / "index.html").write_bytes(b"<p>caf\xe9</p>")

        with pytest.raises(BuildError, match="index.html") as excinfo:
            minify_asset(plan, "index.html")

        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_reduction_of_empty_source_is_zero(self) -> None:
        assert FileReport(path=Path("a.css"), original_size=0, minified_size=0).reduction == 0.0


class TestCopy:
    """Tests for verbatim asset copies."""

    def test_images_are_byte_identical(self, plan: BuildPlan) -> None:
        reports = copy_images(plan)

        assert [r.path for r in reports] == [
            Path("images/icons/bolt.svg"),
            Path("images/logo.png"),
        ]
        for report in reports:
            source = plan.source_dir / report.path
            assert (plan.dist_dir / report.path).read_bytes() == source.read_bytes()
            assert report.size == source.stat().st_size

    def test_missing_images_dir_raises(self, plan: BuildPlan) -> None:
        plan.images_dir = "pictures"
        with pytest.raises(BuildError, match="Images directory not found"):
            copy_images(plan)

    def test_extra_files_skip_missing(self, plan: BuildPlan) -> None:
        """LICENSE exists in the fixture, README.md does not."""
        reports = copy_extra_files(plan)

        assert [r.path for r in reports] == [Path("LICENSE")]
        assert (plan.dist_dir / "LICENSE").read_text(encoding="utf-8") == "MIT\n"
        assert not (plan.dist_dir / "README.md").exists()


@pytest.mark.build
class TestRunBuild:
    """Tests for run_build end to end."""

    def test_builds_all_artifacts(self, plan: BuildPlan) -> None:
        lines: list[str] = []

        result = run_build(plan, echo=lines.append)

        assert [r.path.as_posix() for r in result.minified] == [
            "javascripts/main.js",
            "stylesheets/stylesheet.css",
            "stylesheets/pygment_trac.css",
            "stylesheets/print.css",
            "index.html",
        ]
        assert (plan.dist_dir / "stylesheets" / "print.css").read_text(
            encoding="utf-8"
        ) == "body{margin:0;color:#333}"
        assert (plan.dist_dir / "index.html").read_text(
            encoding="utf-8"
        ) == "<html><body><p>Hello</p></body></html>"
        assert len(result.copied) == 3
        assert 0 < result.dist_size < result.source_size

    def test_reports_sizes(self, plan: BuildPlan) -> None:
        lines: list[str] = []

        result = run_build(plan, echo=lines.append)

        assert any(
            line.startswith("  ✓ index.html: ") and line.endswith("% reduction)") for line in lines
        )
        assert "Build Summary" in lines
        assert f"Reduction:   {result.reduction:.1f}%" in lines
        assert lines[-1].startswith("\n✓ Build complete!")

    def test_aborts_on_first_failure(self, plan: BuildPlan) -> None:
        """A missing stylesheet stops the run before HTML is written."""
        (plan.source_dir / "stylesheets" / "pygment_trac.css").unlink()

        with pytest.raises(BuildError):
            run_build(plan, echo=lambda line: None)

        assert (plan.dist_dir / "javascripts" / "main.js").exists()
        assert not (plan.dist_dir / "index.html").exists()

    def test_rerun_is_idempotent(self, plan: BuildPlan) -> None:
        first = run_build(plan, echo=lambda line: None)
        second = run_build(plan, echo=lambda line: None)

        assert first == second
