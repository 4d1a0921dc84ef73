"""pace - running pace calculator CLI."""

from pacecalc import __version__

__all__ = ["__version__"]
