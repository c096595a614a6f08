"""Shared utilities: logging."""

from filmapi.utils.logger import setup_logger

__all__ = ["setup_logger"]
