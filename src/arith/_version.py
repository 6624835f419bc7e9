"""Single source of truth for the arith version."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version


def get_version() -> str:
    """Get the installed arith version from package metadata."""
    try:
        return _metadata_version("arith")
    except PackageNotFoundError:
        return "0.0.0"
