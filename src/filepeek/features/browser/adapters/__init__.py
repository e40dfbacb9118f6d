"""Adapters binding browser ports to the local filesystem."""

from .action_log import ActionLog

__all__ = ["ActionLog"]
