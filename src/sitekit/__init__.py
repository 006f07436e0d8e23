"""sitekit: build a static site and search its sections in-page."""

from sitekit.exceptions import BuildError, SitekitError, UnsupportedAssetError
from sitekit.minify import minifier_for, minify_css, minify_html, minify_js
from sitekit.pipeline import BuildPlan, run_build
from sitekit.schemas import BuildResult, SearchResult, WidgetState
from sitekit.widget import SectionSearch

__all__ = [
    "BuildError",
    "BuildPlan",
    "BuildResult",
    "SearchResult",
    "SectionSearch",
    "SitekitError",
    "UnsupportedAssetError",
    "WidgetState",
    "minifier_for",
    "minify_css",
    "minify_html",
    "minify_js",
    "run_build",
]
