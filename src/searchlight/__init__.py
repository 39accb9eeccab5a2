"""Searchlight: a plugin-driven launcher search engine."""

__version__ = "0.1.0"
