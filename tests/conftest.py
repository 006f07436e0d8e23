"""Test setup for sitekit."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    The end-to-end build tests write a small site to a temporary directory:
        pytest -m "not build"   # skip them
    """
    config.addinivalue_line(
        "markers",
        "build: marks tests that run the full build pipeline on disk",
    )


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A minimal site source tree matching the default build plan."""
    root = tmp_path / "site"
    (root / "javascripts").mkdir(parents=True)
    (root / "stylesheets").mkdir()
    (root / "images" / "icons").mkdir(parents=True)

    (root / "javascripts" / "main.js").write_text(
        "// Search\nfunction add(a, b) {\n  /* sum */\n  return a + b;\n}\n",
        encoding="utf-8",
    )
    for name in ("stylesheet.css", "pygment_trac.css", "print.css"):
        (root / "stylesheets" / name).write_text(
            "/* theme */\nbody {\n  margin: 0;\n  color: #333;\n}\n", encoding="utf-8"
        )
    (root / "index.html").write_text(
        "<html>\n  <!-- nav -->\n  <body>\n    <p>Hello</p>\n  </body>\n</html>\n",
        encoding="utf-8",
    )
    (root / "images" / "logo.png").write_bytes(bytes(range(256)) * 4)
    (root / "images" / "icons" / "bolt.svg").write_bytes(b"<svg>\r\n  </svg>\x00")
    (root / "LICENSE").write_text("MIT\n", encoding="utf-8")
    return root


class FakeHandle:
    def __init__(self, when: float, callback, args: tuple) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock implementing the call_later half of an event loop."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[FakeHandle] = []

    def call_later(self, delay: float, callback, *args) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = [h for h in self.handles if not h.cancelled and h.when <= self.now]
        for handle in due:
            self.handles.remove(handle)
            handle.callback(*handle.args)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def page_html() -> str:
    """A project page with a search box and four searchable sections."""
    return """
    <html>
      <body>
        <input id="search_input" type="text">
        <div id="search_results_info" style="display: none"></div>
        <div id="main_content">
          <p>Intro about btcd.</p>
          <h3>Installing Bolt</h3>
          <p>Run the bolt installer.</p>
          <pre><code>bolt --install</code></pre>
          <div>See <a href="#docs">the bolt docs</a> or <code>bolt help</code>.</div>
          <h3>Wallet</h3>
          <ul><li>Keys are <em>stored</em> safely.</li></ul>
          <p>Use <code>wallet new</code> to create a wallet.</p>
          <h3>Pattern a.b*c</h3>
          <p>Literal a.b*c and axbbc.</p>
        </div>
      </body>
    </html>
    """
