"""Module entry point for running with python -m sitekit."""

from sitekit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
