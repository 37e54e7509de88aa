"""
Type mapping for schema type references.

Resolves a schema type reference either to a target language primitive or to
the qualified name of a generated class, handling the ``ArrayOfX`` and ``X[]``
array notations.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from .namespaces import Namespace, NamespaceCategory, NamespaceInflector
from .naming import NameSanitizer
from .schema import XSD_NS, ComplexType, QName, SchemaSet, SimpleType
from ..logging_config import get_logger

if TYPE_CHECKING:
    from .inheritance import InheritanceClassifier
    from .target import TargetLanguage

logger = get_logger(__name__)


class PrimitiveKind(Enum):
    """Primitive type families shared by all target languages."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    ANY = "any"


# XMLSchema built-in names (lowercase) -> primitive family
XSD_PRIMITIVE_KINDS = {
    # integral families
    "int": PrimitiveKind.INTEGER,
    "integer": PrimitiveKind.INTEGER,
    "long": PrimitiveKind.INTEGER,
    "byte": PrimitiveKind.INTEGER,
    "short": PrimitiveKind.INTEGER,
    "negativeinteger": PrimitiveKind.INTEGER,
    "nonnegativeinteger": PrimitiveKind.INTEGER,
    "nonpositiveinteger": PrimitiveKind.INTEGER,
    "positiveinteger": PrimitiveKind.INTEGER,
    "unsignedbyte": PrimitiveKind.INTEGER,
    "unsignedint": PrimitiveKind.INTEGER,
    "unsignedlong": PrimitiveKind.INTEGER,
    "unsignedshort": PrimitiveKind.INTEGER,
    # floating families
    "float": PrimitiveKind.FLOAT,
    "double": PrimitiveKind.FLOAT,
    "decimal": PrimitiveKind.FLOAT,
    # string families
    "<anyxml>": PrimitiveKind.STRING,
    "string": PrimitiveKind.STRING,
    "token": PrimitiveKind.STRING,
    "normalizedstring": PrimitiveKind.STRING,
    "hexbinary": PrimitiveKind.STRING,
    "base64binary": PrimitiveKind.STRING,
    "anyuri": PrimitiveKind.STRING,
    "language": PrimitiveKind.STRING,
    "name": PrimitiveKind.STRING,
    "ncname": PrimitiveKind.STRING,
    "nmtoken": PrimitiveKind.STRING,
    "id": PrimitiveKind.STRING,
    "idref": PrimitiveKind.STRING,
    "qname": PrimitiveKind.STRING,
    "boolean": PrimitiveKind.BOOLEAN,
    # date/time
    "datetime": PrimitiveKind.DATETIME,
    "date": PrimitiveKind.DATETIME,
    "time": PrimitiveKind.DATETIME,
    # wildcards
    "anytype": PrimitiveKind.ANY,
    "anysimpletype": PrimitiveKind.ANY,
}

_ARRAY_PATTERN = re.compile(r"^(?:ArrayOf(?P<t1>\w+)|(?P<t2>\w+)\[\])$", re.IGNORECASE)


def split_array_notation(type_name: str) -> Tuple[str, bool]:
    """
    Strip an array wrapper from a type name.

    Returns:
        Tuple of (bare name, is_array)
    """
    match = _ARRAY_PATTERN.match(type_name)
    if not match:
        return type_name, False
    return match.group("t1") or match.group("t2"), True


@dataclass(frozen=True)
class ResolvedType:
    """
    Immutable result of resolving a schema type reference.

    Equal values are produced for ``ArrayOfX`` and ``X[]`` references.
    """

    type_name: str  # Target name without namespace (e.g. "int", "Order")
    schema_name: str  # Bare schema name after array stripping
    declaration: str  # Qualified name in the language array notation
    namespace: Namespace = field(default_factory=Namespace)
    is_array: bool = False
    is_primitive: bool = False
    primitive_kind: Optional[PrimitiveKind] = None

    @property
    def qualified_name(self) -> str:
        return self.namespace.qualify(self.type_name)


class TypeMapper:
    """Central engine for mapping schema type references to target types."""

    def __init__(
        self,
        language: "TargetLanguage",
        inflector: NamespaceInflector,
        sanitizer: Optional[NameSanitizer] = None,
        schema_set: Optional[SchemaSet] = None,
        classifier: Optional["InheritanceClassifier"] = None,
    ):
        """
        Initialize the type mapper.

        Args:
            language: Target language profile
            inflector: Namespace inflector for generated type references
            sanitizer: Name sanitizer, defaults to the language's
            schema_set: Loaded types, used to pick the namespace category
            classifier: When given, non-enum simple types resolve to their
                terminal primitive instead of a generated class
        """
        self.language = language
        self.inflector = inflector
        self.sanitizer = sanitizer or language.create_sanitizer()
        self.schema_set = schema_set
        self.classifier = classifier

    def resolve(
        self,
        type_ref: QName,
        default_category: NamespaceCategory = NamespaceCategory.TYPE,
    ) -> ResolvedType:
        """
        Resolve a schema type reference.

        Args:
            type_ref: Namespace-qualified type reference
            default_category: Namespace category for references that are not
                found in the schema set

        Returns:
            The resolved type
        """
        bare_name, is_array = split_array_notation(type_ref.name)
        owner = type_ref.namespace

        if owner == XSD_NS:
            kind = XSD_PRIMITIVE_KINDS.get(bare_name.lower())
            if kind is not None:
                return self._primitive(kind, bare_name, is_array)
            # unknown XMLSchema names fall through to the identifier branch
            logger.debug("Unknown XMLSchema type %s treated as identifier", bare_name)

        schema_type = self._lookup(QName(owner, bare_name))

        if isinstance(schema_type, SimpleType) and self.classifier is not None:
            classification = self.classifier.classify(schema_type)
            if not classification.is_enum:
                # nearest mapped XMLSchema ancestor, e.g. int rather than decimal
                for base in classification.chain:
                    kind = XSD_PRIMITIVE_KINDS.get(base.name.lower())
                    if base.namespace == XSD_NS and kind is not None:
                        return self._primitive(kind, bare_name, is_array)

        if isinstance(schema_type, SimpleType):
            category = NamespaceCategory.ENUM
        elif isinstance(schema_type, ComplexType):
            category = NamespaceCategory.TYPE
        else:
            category = default_category

        type_name = self.sanitizer.sanitize_identifier(bare_name)
        namespace = self.inflector.inflect(owner, owner == XSD_NS, category, bare_name)

        return ResolvedType(
            type_name=type_name,
            schema_name=bare_name,
            declaration=self.language.declare(namespace.qualify(type_name), is_array),
            namespace=namespace,
            is_array=is_array,
            is_primitive=False,
        )

    def _primitive(self, kind: PrimitiveKind, bare_name: str, is_array: bool) -> ResolvedType:
        type_name = self.language.primitive_type(kind)
        return ResolvedType(
            type_name=type_name,
            schema_name=bare_name,
            declaration=self.language.declare(type_name, is_array),
            namespace=Namespace((), self.language.module_separator),
            is_array=is_array,
            is_primitive=True,
            primitive_kind=kind,
        )

    def _lookup(self, qname: QName):
        if self.schema_set is None:
            return None
        return self.schema_set.get(qname)
