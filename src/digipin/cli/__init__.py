"""
DIGIPIN CLI Package

Command-line front end for the DIGIPIN grid toolkit.
"""

from digipin import __version__


__all__ = ["__version__"]
