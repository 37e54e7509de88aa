"""
WSDL class model compiler.

Maps the types and services of a parsed WSDL/XSD document onto a target
language class model: enumerations, data-transfer objects, service proxies
and the classmap that ties schema names to generated class names.
"""

from .core import (
    QName,
    SchemaSet,
    SimpleType,
    ComplexType,
    Element,
    Restriction,
    Service,
    Operation,
    CompilerError,
    DuplicateMappingError,
    CompilerConfig,
    load_config,
    CompilationResult,
    SchemaCompiler,
    serialize_classmap,
    parse_classmap,
)
from .registry import TargetRegistry, get_compiler, get_registry, list_supported_languages
from .logging_config import get_logger, setup_logging

# Version info
__version__ = "0.1.0"


def compile_schema(schema_set, language="python", config=None) -> CompilationResult:
    """
    Compile a schema set into a class model.

    Args:
        schema_set: Loaded types and services
        language: Target language name or alias
        config: CompilerConfig, override dict or path to a JSON config file

    Returns:
        CompilationResult with descriptors and the classmap
    """
    compiler = get_compiler(language, config)
    return compiler.compile(schema_set)


__all__ = [
    "QName",
    "SchemaSet",
    "SimpleType",
    "ComplexType",
    "Element",
    "Restriction",
    "Service",
    "Operation",
    "CompilerError",
    "DuplicateMappingError",
    "CompilerConfig",
    "load_config",
    "CompilationResult",
    "SchemaCompiler",
    "serialize_classmap",
    "parse_classmap",
    "TargetRegistry",
    "get_compiler",
    "get_registry",
    "list_supported_languages",
    "get_logger",
    "setup_logging",
    "compile_schema",
]
