"""Fit overlong filenames into the 255-byte filesystem limit."""

from namefit.shorten import new_filename, shorten_filename

__version__ = "0.2.0"

__all__ = ["new_filename", "shorten_filename", "__version__"]
