"""
Core class model compilation functionality.

Contains the language-agnostic components: schema model, naming, type
mapping, namespace inflection, restriction analysis, builders and classmap.
"""

from .schema import (
    XSD_NS,
    QName,
    xsd,
    Facet,
    Restriction,
    PrimitiveType,
    SimpleType,
    Element,
    ComplexType,
    Operation,
    Service,
    SchemaSet,
)
from .errors import (
    CompilerError,
    InvalidIdentifierError,
    UnresolvedNamespaceError,
    CyclicRestrictionChainError,
    DuplicateMappingError,
    ClassmapFormatError,
)
from .naming import NameSanitizer
from .namespaces import Namespace, NamespaceCategory, NamespaceConfig, NamespaceInflector
from .types import PrimitiveKind, ResolvedType, TypeMapper
from .target import TargetLanguage
from .inheritance import Classification, InheritanceClassifier
from .descriptors import (
    DescriptorKind,
    EnumConstant,
    EnumDescriptor,
    DtoField,
    DtoDescriptor,
    ServiceMethod,
    ServiceDescriptor,
    Visibility,
)
from .classmap import ClassmapRegistry, serialize_classmap, parse_classmap
from .config import CompilerConfig, ConfigError, ConfigManager, load_config
from .builders import ClassModelBuilder
from .compiler import CompilationResult, SchemaCompiler

__all__ = [
    # Schema model
    "XSD_NS",
    "QName",
    "xsd",
    "Facet",
    "Restriction",
    "PrimitiveType",
    "SimpleType",
    "Element",
    "ComplexType",
    "Operation",
    "Service",
    "SchemaSet",
    # Errors
    "CompilerError",
    "InvalidIdentifierError",
    "UnresolvedNamespaceError",
    "CyclicRestrictionChainError",
    "DuplicateMappingError",
    "ClassmapFormatError",
    # Components
    "NameSanitizer",
    "Namespace",
    "NamespaceCategory",
    "NamespaceConfig",
    "NamespaceInflector",
    "PrimitiveKind",
    "ResolvedType",
    "TypeMapper",
    "TargetLanguage",
    "Classification",
    "InheritanceClassifier",
    # Descriptors
    "DescriptorKind",
    "EnumConstant",
    "EnumDescriptor",
    "DtoField",
    "DtoDescriptor",
    "ServiceMethod",
    "ServiceDescriptor",
    "Visibility",
    # Classmap
    "ClassmapRegistry",
    "serialize_classmap",
    "parse_classmap",
    # Configuration
    "CompilerConfig",
    "ConfigError",
    "ConfigManager",
    "load_config",
    # Compilation
    "ClassModelBuilder",
    "CompilationResult",
    "SchemaCompiler",
]
