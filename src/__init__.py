"""linksync - client-side cache synchronization for a link-voting feed."""

from linksync.version import __version__

__all__ = ["__version__"]
