"""Custom exception hierarchy for Searchlight.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
"""

from __future__ import annotations


class SearchlightError(Exception):
    """Base class for all Searchlight exceptions."""


class ConfigError(SearchlightError):
    """Raised when configuration loading or validation fails."""


class StorageError(SearchlightError):
    """Raised when a plugin temporary folder cannot be created or removed."""


class PluginError(SearchlightError):
    """Raised when a search plugin fails to rescan or to list its items."""


class CacheClearError(SearchlightError):
    """Raised when clearing plugin caches leaves them in an unknown state."""


class SettingsUpdateError(SearchlightError):
    """Raised when new search engine settings cannot be applied."""
