from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a height field is constructed with unusable settings."""
