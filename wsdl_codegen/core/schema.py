"""
Schema model consumed by the class model compiler.

A normalized, reader-independent representation of the types and services
described by a WSDL document. Type references are QName keys into the
``SchemaSet`` arena, so self and mutual references never nest.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Iterator, Union

XSD_NS = "http://www.w3.org/2001/XMLSchema"


@dataclass(frozen=True)
class QName:
    """Namespace-qualified schema name."""

    namespace: Optional[str]
    name: str

    @property
    def text(self) -> str:
        """Clark notation, used as the schema-qualified classmap key."""
        if self.namespace:
            return f"{{{self.namespace}}}{self.name}"
        return self.name

    @classmethod
    def parse(cls, text: str) -> "QName":
        """Parse Clark notation (``{ns}name``) or a bare local name."""
        if text.startswith("{") and "}" in text:
            namespace, _, name = text[1:].partition("}")
            return cls(namespace or None, name)
        return cls(None, text)

    def __str__(self) -> str:
        return self.text


def xsd(name: str) -> QName:
    """Shortcut for a name in the XMLSchema namespace."""
    return QName(XSD_NS, name)


ANY_SIMPLE_TYPE = xsd("anySimpleType")
ANY_TYPE = xsd("anyType")


@dataclass
class Facet:
    """A single restriction facet record, e.g. one enumeration literal."""

    value: str
    doc: Optional[str] = None


@dataclass
class Restriction:
    """Base type reference plus the ordered facet checks."""

    base: QName
    checks: Dict[str, List[Facet]] = field(default_factory=dict)

    def add_check(self, facet_name: str, value: str, doc: Optional[str] = None) -> None:
        self.checks.setdefault(facet_name, []).append(Facet(value, doc))

    @property
    def enumerations(self) -> List[Facet]:
        return self.checks.get("enumeration", [])


@dataclass
class PrimitiveType:
    """A built-in type with no restriction of its own (e.g. ``anySimpleType``)."""

    qname: QName
    doc: Optional[str] = None
    abstract: bool = False


@dataclass
class SimpleType:
    """A scalar type, optionally restricting another simple type."""

    qname: QName
    restriction: Optional[Restriction] = None
    doc: Optional[str] = None
    abstract: bool = False


@dataclass
class Element:
    """A named member of a complex type."""

    name: str
    type: QName
    nillable: bool = False
    doc: Optional[str] = None


@dataclass
class ComplexType:
    """A structured type with ordered elements and an optional extension base."""

    qname: QName
    elements: List[Element] = field(default_factory=list)
    parent: Optional[QName] = None
    abstract: bool = False
    doc: Optional[str] = None

    def add_element(self, element: Element) -> None:
        self.elements.append(element)


SchemaType = Union[PrimitiveType, SimpleType, ComplexType]


@dataclass
class Operation:
    """A service operation with its input and output message types."""

    name: str
    input: QName
    output: QName
    doc: Optional[str] = None


@dataclass
class Service:
    """A port type: a named, ordered list of operations."""

    name: str
    namespace: Optional[str]
    operations: List[Operation] = field(default_factory=list)
    doc: Optional[str] = None

    @property
    def qname(self) -> QName:
        return QName(self.namespace, self.name)


# Derivations of the XSD built-in simple types: derived name -> base name.
# Primitive roots restrict anySimpleType, so every chain ends at the sentinel.
XSD_BUILTIN_DERIVATIONS = {
    # primitive roots
    "string": "anySimpleType",
    "boolean": "anySimpleType",
    "decimal": "anySimpleType",
    "float": "anySimpleType",
    "double": "anySimpleType",
    "duration": "anySimpleType",
    "dateTime": "anySimpleType",
    "time": "anySimpleType",
    "date": "anySimpleType",
    "gYearMonth": "anySimpleType",
    "gYear": "anySimpleType",
    "gMonthDay": "anySimpleType",
    "gDay": "anySimpleType",
    "gMonth": "anySimpleType",
    "hexBinary": "anySimpleType",
    "base64Binary": "anySimpleType",
    "anyURI": "anySimpleType",
    "QName": "anySimpleType",
    "NOTATION": "anySimpleType",
    # string family
    "normalizedString": "string",
    "token": "normalizedString",
    "language": "token",
    "NMTOKEN": "token",
    "Name": "token",
    "NCName": "Name",
    "ID": "NCName",
    "IDREF": "NCName",
    "ENTITY": "NCName",
    # integer family
    "integer": "decimal",
    "nonPositiveInteger": "integer",
    "negativeInteger": "nonPositiveInteger",
    "long": "integer",
    "int": "long",
    "short": "int",
    "byte": "short",
    "nonNegativeInteger": "integer",
    "unsignedLong": "nonNegativeInteger",
    "unsignedInt": "unsignedLong",
    "unsignedShort": "unsignedInt",
    "unsignedByte": "unsignedShort",
    "positiveInteger": "nonNegativeInteger",
}


def builtin_types() -> List[SchemaType]:
    """Create the XSD built-in types in derivation order."""
    types: List[SchemaType] = [
        PrimitiveType(ANY_TYPE),
        PrimitiveType(ANY_SIMPLE_TYPE),
    ]
    for name, base in XSD_BUILTIN_DERIVATIONS.items():
        types.append(SimpleType(xsd(name), Restriction(xsd(base))))
    return types


class SchemaSet:
    """Arena of every loaded schema type plus the discovered services."""

    def __init__(self, include_builtins: bool = True):
        self._types: Dict[QName, SchemaType] = {}
        self._builtins: set[QName] = set()
        self.services: List[Service] = []

        if include_builtins:
            for schema_type in builtin_types():
                self._types[schema_type.qname] = schema_type
                self._builtins.add(schema_type.qname)

    def add_type(self, schema_type: SchemaType) -> SchemaType:
        """Add a user type; identity must be unique within the set."""
        qname = schema_type.qname
        if qname in self._types and qname not in self._builtins:
            raise ValueError(f"Duplicate schema type: {qname.text}")
        # overriding a builtin moves it to discovery order
        self._types.pop(qname, None)
        self._types[qname] = schema_type
        self._builtins.discard(qname)
        return schema_type

    def add_service(self, service: Service) -> Service:
        self.services.append(service)
        return service

    def get(self, qname: QName) -> Optional[SchemaType]:
        return self._types.get(qname)

    def __contains__(self, qname: QName) -> bool:
        return qname in self._types

    def __len__(self) -> int:
        return len(self._types) - len(self._builtins)

    def is_builtin(self, qname: QName) -> bool:
        return qname in self._builtins

    def user_types(self) -> Iterator[SchemaType]:
        """Types added by the reader, in discovery order."""
        for qname, schema_type in self._types.items():
            if qname not in self._builtins:
                yield schema_type

    @property
    def simple_types(self) -> List[SimpleType]:
        return [t for t in self.user_types() if isinstance(t, SimpleType)]

    @property
    def complex_types(self) -> List[ComplexType]:
        return [t for t in self.user_types() if isinstance(t, ComplexType)]
