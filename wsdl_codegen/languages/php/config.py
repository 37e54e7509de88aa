"""
PHP target profile and type mappings.
"""

from ...core.target import TargetLanguage
from ...core.types import PrimitiveKind
from .naming import PHP_RESERVED_WORDS


PHP_TYPE_MAP = {
    PrimitiveKind.INTEGER: "int",
    PrimitiveKind.FLOAT: "float",
    PrimitiveKind.STRING: "string",
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.DATETIME: "\\DateTime",
    PrimitiveKind.ANY: "mixed",
}

PHP_TARGET = TargetLanguage(
    name="php",
    file_extension=".php",
    reserved_words=frozenset(PHP_RESERVED_WORDS),
    type_names=PHP_TYPE_MAP,
    module_separator="\\",
    array_format="{}[]",
    case_insensitive_keywords=True,
)
