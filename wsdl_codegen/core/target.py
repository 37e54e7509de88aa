"""
Target language profiles.

A profile bundles everything language-specific the compiler needs: reserved
words, primitive type names, array notation and the module separator. Default
base classes are configuration (see ``core.config``). Profiles are defined
under ``wsdl_codegen.languages``.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet

from .naming import NameSanitizer
from .types import PrimitiveKind


@dataclass(frozen=True)
class TargetLanguage:
    """Immutable description of a code generation target."""

    name: str
    file_extension: str
    reserved_words: FrozenSet[str]
    type_names: Dict[PrimitiveKind, str]
    module_separator: str = "."
    array_format: str = "list[{}]"
    case_insensitive_keywords: bool = False
    aliases: tuple = field(default_factory=tuple)

    def create_sanitizer(self, strict: bool = False) -> NameSanitizer:
        """Create a name sanitizer configured for this language."""
        return NameSanitizer(
            set(self.reserved_words),
            case_insensitive=self.case_insensitive_keywords,
            strict=strict,
        )

    def primitive_type(self, kind: PrimitiveKind) -> str:
        return self.type_names[kind]

    def declare(self, type_name: str, is_array: bool = False) -> str:
        """Render a type declaration, wrapping arrays in the language notation."""
        if is_array:
            return self.array_format.format(type_name)
        return type_name
