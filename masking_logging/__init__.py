"""Logging utilities for XML masking.

Provides a logger with switchable log files for masking operations.
"""

from .masking_logger import MaskingLogger

__all__ = ["MaskingLogger"]
