"""Observability helpers."""

from src.observability.logging import (
    bind_command_context,
    clear_command_context,
    configure_logging,
    get_logger,
)


__all__ = [
    "bind_command_context",
    "clear_command_context",
    "configure_logging",
    "get_logger",
]
