"""Installed package version lookup."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "oauth-credentials-generator"


def get_version() -> str | None:
    """Return the installed distribution version.

    Returns:
        Version string, or None when the package metadata is not available
        (e.g. running from a source checkout that was never installed)
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return None
