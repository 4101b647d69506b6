"""
Utilities package - shared helpers for the pixel strip packages
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
]
