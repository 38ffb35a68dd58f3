"""Utility modules for Ramitas.

Provides:
- logger: get_logger for logging
"""

from ramitas.utils.logger import get_logger

__all__ = ["get_logger"]
