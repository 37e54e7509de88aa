"""
Naming utilities for safe code generation.

Repairs schema names (type names, element names, enumeration literals and
operation names) so they can be used as identifiers in the target language.
Reserved words are checked against a static set per language.
"""

import re
from typing import Set, Dict, Optional

from .errors import InvalidIdentifierError

INVALID_NAME_SUFFIX = "_"

_WHITESPACE = re.compile(r"\s")


class NameSanitizer:
    """Validates and repairs identifiers for one target language."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        case_insensitive: bool = False,
        suffix: str = INVALID_NAME_SUFFIX,
        strict: bool = False,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            case_insensitive: Whether reserved words match regardless of case
            suffix: Marker appended to repaired names
            strict: Raise InvalidIdentifierError instead of repairing
        """
        self.case_insensitive = case_insensitive
        self.suffix = suffix
        self.strict = strict
        words = reserved_words or set()
        self.reserved_words = (
            {word.lower() for word in words} if case_insensitive else set(words)
        )
        self._name_cache: Dict[str, str] = {}

    def is_reserved(self, name: str) -> bool:
        """Check if the given name is a reserved word of the language."""
        key = name.lower() if self.case_insensitive else name
        return key in self.reserved_words

    def is_legal(self, name: str) -> bool:
        """Check if the given name is a legal, non-reserved identifier."""
        return name.isidentifier() and not self.is_reserved(name)

    def sanitize_identifier(self, raw: str) -> str:
        """
        Make the given string usable as an identifier.

        Legal, non-reserved names are returned unchanged. Anything else gets
        the suffix marker appended exactly once, after stripping disallowed
        characters and, for an illegal leading character, capitalizing the
        first character.

        Args:
            raw: Original name

        Returns:
            Sanitized name

        Raises:
            InvalidIdentifierError: In strict mode, if the name needs repairing
        """
        if raw in self._name_cache:
            return self._name_cache[raw]

        if raw.isidentifier():
            name = raw
            if self.is_reserved(name):
                self._reject(raw, "reserved word")
                name = f"{name}{self.suffix}"
        else:
            self._reject(raw, "not a legal identifier")
            name = self._lexical_fix(raw)

        self._name_cache[raw] = name
        return name

    def sanitize_variable_name(self, raw: str) -> str:
        """Replace whitespace so the string can be used as a variable name."""
        return _WHITESPACE.sub("_", raw)

    def sanitize_constant_name(self, raw: str) -> str:
        """Both sanitizing passes used for constant and class names."""
        return self.sanitize_identifier(self.sanitize_variable_name(raw))

    def _lexical_fix(self, raw: str) -> str:
        head, tail = raw[:1], _strip_disallowed(raw[1:])

        if head.isidentifier():
            return f"{head}{tail}{self.suffix}"

        # illegal leading character
        name = _strip_disallowed(head) + tail
        if not name:
            return self.suffix
        name = name[0].upper() + name[1:]
        if not name[:1].isidentifier():
            name = f"{self.suffix}{name}"
        return f"{name}{self.suffix}"

    def _reject(self, raw: str, reason: str) -> None:
        if self.strict:
            raise InvalidIdentifierError(raw, reason)

    def clear_cache(self) -> None:
        """Forget every cached sanitized name."""
        self._name_cache.clear()


def _strip_disallowed(text: str) -> str:
    """Drop every character that cannot continue an identifier."""
    return "".join(char for char in text if f"_{char}".isidentifier())
