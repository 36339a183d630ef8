from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised for caller or configuration bugs such as unknown categories or keys."""


__all__ = ["ConfigurationError"]
