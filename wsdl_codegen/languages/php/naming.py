"""
PHP-specific naming utilities and sanitization.

PHP keywords are case-insensitive, so ``Class`` and ``LIST`` are reserved too.
"""

from ...core.naming import NameSanitizer


# PHP keywords and compile-time constants that cannot be used as names
PHP_RESERVED_WORDS = {
    "__halt_compiler",
    "abstract",
    "and",
    "array",
    "as",
    "break",
    "callable",
    "case",
    "catch",
    "class",
    "clone",
    "const",
    "continue",
    "declare",
    "default",
    "die",
    "do",
    "echo",
    "else",
    "elseif",
    "empty",
    "enddeclare",
    "endfor",
    "endforeach",
    "endif",
    "endswitch",
    "endwhile",
    "eval",
    "exit",
    "extends",
    "final",
    "finally",
    "fn",
    "for",
    "foreach",
    "function",
    "global",
    "goto",
    "if",
    "implements",
    "include",
    "include_once",
    "instanceof",
    "insteadof",
    "interface",
    "isset",
    "list",
    "match",
    "namespace",
    "new",
    "or",
    "print",
    "private",
    "protected",
    "public",
    "readonly",
    "require",
    "require_once",
    "return",
    "static",
    "switch",
    "throw",
    "trait",
    "try",
    "unset",
    "use",
    "var",
    "while",
    "xor",
    "yield",
    # magic constants
    "__class__",
    "__dir__",
    "__file__",
    "__function__",
    "__line__",
    "__method__",
    "__namespace__",
    "__trait__",
}


def create_php_sanitizer(strict: bool = False) -> NameSanitizer:
    """Create a name sanitizer for PHP identifiers."""
    return NameSanitizer(PHP_RESERVED_WORDS, case_insensitive=True, strict=strict)
