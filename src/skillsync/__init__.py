"""Install and keep in sync versioned skill components in project directories."""

from skillsync.version import __version__

__all__ = ["__version__"]
