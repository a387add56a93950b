"""Utility modules for texdsl.

Provides:
- logger: get_logger for logging
"""

from texdsl.utils.logger import get_logger

__all__ = ["get_logger"]
