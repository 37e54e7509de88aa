"""
Python-specific naming utilities and sanitization.

Handles Python reserved words for generated class, field and constant names.
"""

from ...core.naming import NameSanitizer


# Python reserved keywords
PYTHON_RESERVED_WORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
}


def create_python_sanitizer(strict: bool = False) -> NameSanitizer:
    """Create a name sanitizer for Python identifiers."""
    return NameSanitizer(PYTHON_RESERVED_WORDS, strict=strict)
