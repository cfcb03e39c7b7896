"""Static file server for the "is it Friday?" page.

The server lives in `fridaysite.main`; the page it hosts ships as package
data under `fridaysite/site`.
"""
from importlib.metadata import PackageNotFoundError, version

try:  # Resolves once installed; source checkouts fall back to a dev version.
    __version__ = version("fridaysite")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
