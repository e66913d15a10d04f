"""Display settings loader."""

from .settings import ConfigurationError, Settings

__all__ = ["ConfigurationError", "Settings"]
