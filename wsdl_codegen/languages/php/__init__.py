"""
PHP target profile.

Namespaces use ``\\`` separators, arrays are declared as ``T[]`` and service
proxies extend ``\\SoapClient`` by default.
"""

from .naming import PHP_RESERVED_WORDS, create_php_sanitizer
from .config import PHP_TARGET, PHP_TYPE_MAP

__all__ = [
    "PHP_TARGET",
    "PHP_TYPE_MAP",
    "PHP_RESERVED_WORDS",
    "create_php_sanitizer",
]
