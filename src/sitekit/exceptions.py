"""Custom exceptions for sitekit."""


class SitekitError(Exception):
    """Base exception for sitekit operations."""


class BuildError(SitekitError):
    """Error while reading, writing, or copying a build artifact."""


class UnsupportedAssetError(BuildError):
    """No minifier is registered for the asset's file type."""
