"""Utility modules for stylemix."""

from stylemix.utils.logger import get_logger

__all__ = ["get_logger"]
