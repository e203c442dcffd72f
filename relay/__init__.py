"""Release announcement and release-notes email dispatcher."""

__version__ = "0.1.0"
