"""Utility helpers for supctl."""

from ._logging import LogFormatType, close_client_logger, create_client_logger

__all__ = [
    "LogFormatType",
    "close_client_logger",
    "create_client_logger",
]
