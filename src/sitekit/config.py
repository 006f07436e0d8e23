"""Local configuration for sitekit."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DIST_DIR = "dist"
DEFAULT_SEARCH_DEBOUNCE_S = 0.3

# Source files minified by the build, relative to the source directory.
JS_FILES = ("javascripts/main.js",)
CSS_FILES = (
    "stylesheets/stylesheet.css",
    "stylesheets/pygment_trac.css",
    "stylesheets/print.css",
)
HTML_FILES = ("index.html",)
IMAGES_DIR = "images"
EXTRA_FILES = ("LICENSE", "README.md")

# Element ids the search widget binds to in a rendered page.
SEARCH_INPUT_ID = "search_input"
SEARCH_STATUS_ID = "search_results_info"
SEARCH_CONTAINER_ID = "main_content"
SECTION_HEADING = "h3"

SITEKIT_SOURCE_DIR = Path(os.getenv("SITEKIT_SOURCE_DIR", ".")).expanduser().resolve()
# Set when the output directory is pinned by the environment, not derived.
SITEKIT_DIST_DIR_PINNED = "SITEKIT_DIST_DIR" in os.environ
SITEKIT_DIST_DIR = Path(os.getenv("SITEKIT_DIST_DIR", str(SITEKIT_SOURCE_DIR / DEFAULT_DIST_DIR))).expanduser().resolve()
SITEKIT_SEARCH_DEBOUNCE_S = float(os.getenv("SITEKIT_SEARCH_DEBOUNCE_S", str(DEFAULT_SEARCH_DEBOUNCE_S)))
