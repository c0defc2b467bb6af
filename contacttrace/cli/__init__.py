"""contacttrace command line."""
from contacttrace import __version__

__all__ = ["__version__"]
