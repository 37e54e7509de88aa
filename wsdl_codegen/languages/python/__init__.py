"""
Python target profile.

Generated enums derive from ``enum.Enum`` by default; arrays are ``list[T]``.
"""

from .naming import PYTHON_RESERVED_WORDS, create_python_sanitizer
from .config import PYTHON_TARGET, PYTHON_TYPE_MAP

__all__ = [
    "PYTHON_TARGET",
    "PYTHON_TYPE_MAP",
    "PYTHON_RESERVED_WORDS",
    "create_python_sanitizer",
]
