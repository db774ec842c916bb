"""URI parsing, building and resolution, a minimal HTTP message parser, version strings and test helpers."""

__version__ = "0.1.0"