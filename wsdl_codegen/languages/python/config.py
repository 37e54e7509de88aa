"""
Python target profile and type mappings.
"""

from ...core.target import TargetLanguage
from ...core.types import PrimitiveKind
from .naming import PYTHON_RESERVED_WORDS


# Python type mappings
PYTHON_TYPE_MAP = {
    PrimitiveKind.INTEGER: "int",
    PrimitiveKind.FLOAT: "float",
    PrimitiveKind.STRING: "str",
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.DATETIME: "datetime",
    PrimitiveKind.ANY: "Any",
}


PYTHON_TARGET = TargetLanguage(
    name="python",
    file_extension=".py",
    reserved_words=frozenset(PYTHON_RESERVED_WORDS),
    type_names=PYTHON_TYPE_MAP,
    module_separator=".",
    array_format="list[{}]",
    aliases=("py",),
)
