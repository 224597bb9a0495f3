"""Git-style porcelain status reporting."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("porcelain")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
