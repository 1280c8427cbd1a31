"""Version information for enro."""

__version__ = "1.0.0"
__author__ = "The enro authors"
__license__ = "GPL-3.0"
