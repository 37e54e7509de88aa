"""
Class descriptors handed to the code emitter.

One descriptor variant per artifact kind. Descriptors are immutable and only
carry names of other generated classes, never the classes themselves.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from .namespaces import Namespace
from .types import ResolvedType


class DescriptorKind(Enum):
    """Kinds of generated artifacts."""

    ENUM = "enum"
    DTO = "dto"
    SERVICE = "service"


class Visibility(Enum):
    """Visibility of generated DTO properties."""

    PUBLIC = "public"
    PROTECTED = "protected"


@dataclass(frozen=True)
class EnumConstant:
    """A class constant generated from an enumeration facet."""

    name: str
    value: str
    doc: Optional[str] = None


@dataclass(frozen=True)
class DtoField:
    """A DTO property, also a positional constructor parameter."""

    name: str
    wire_name: str
    type: ResolvedType
    nullable: bool = False
    visibility: Visibility = Visibility.PUBLIC
    doc: Optional[str] = None

    @property
    def getter_name(self) -> str:
        return "get" + self.name[:1].upper() + self.name[1:]

    @property
    def setter_name(self) -> str:
        return "set" + self.name[:1].upper() + self.name[1:]


@dataclass(frozen=True)
class ServiceMethod:
    """A service proxy method wrapping one remote operation."""

    name: str
    wire_name: str  # passed through verbatim to the remote call
    parameter_type: ResolvedType
    return_type: ResolvedType
    parameter_name: str = "parameters"
    doc: Optional[str] = None


@dataclass(frozen=True)
class ClassDescriptor:
    """Fields shared by every descriptor variant."""

    name: str
    namespace: Namespace
    schema_name: str
    parent: Optional[str] = None
    abstract: bool = False
    doc: Optional[str] = None
    xml_namespace: Optional[str] = None

    @property
    def qualified_name(self) -> str:
        return self.namespace.qualify(self.name)


@dataclass(frozen=True)
class EnumDescriptor(ClassDescriptor):
    constants: Tuple[EnumConstant, ...] = field(default_factory=tuple)

    kind = DescriptorKind.ENUM

    def get_constant(self, name: str) -> Optional[EnumConstant]:
        for constant in self.constants:
            if constant.name == name:
                return constant
        return None


@dataclass(frozen=True)
class DtoDescriptor(ClassDescriptor):
    fields: Tuple[DtoField, ...] = field(default_factory=tuple)
    imports: Tuple[str, ...] = field(default_factory=tuple)
    accessors: bool = False

    kind = DescriptorKind.DTO

    @property
    def nullable_arguments(self) -> Tuple[bool, ...]:
        """Constructor nullability flags, positionally matching ``fields``."""
        return tuple(f.nullable for f in self.fields)

    def get_field(self, name: str) -> Optional[DtoField]:
        for dto_field in self.fields:
            if dto_field.name == name:
                return dto_field
        return None


@dataclass(frozen=True)
class ServiceDescriptor(ClassDescriptor):
    methods: Tuple[ServiceMethod, ...] = field(default_factory=tuple)
    classmap_name: Optional[str] = None

    kind = DescriptorKind.SERVICE

    def get_method(self, name: str) -> Optional[ServiceMethod]:
        for method in self.methods:
            if method.name == name:
                return method
        return None


AnyDescriptor = Union[EnumDescriptor, DtoDescriptor, ServiceDescriptor]
