"""FixerHub matching core: professional search and the service assistant."""

from fixerhub.version import __version__

__all__ = ["__version__"]
