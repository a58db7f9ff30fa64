"""Maintain parallel, structurally consistent JSON translation catalogs."""

__version__ = "0.1.0"
