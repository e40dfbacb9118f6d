"""Cross-cutting helpers shared by every layer."""

from filepeek.core.errors import ConfigError, FilepeekError

__all__ = ["ConfigError", "FilepeekError"]
