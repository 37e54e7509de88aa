"""
Schema compiler.

Drives one compilation run: feeds every schema entity to the right builder in
discovery order and collects the descriptors and the finalized classmap.
"""

from collections import OrderedDict
from typing import Any, Dict, List, Optional

from .builders import ClassModelBuilder
from .classmap import ClassmapRegistry, serialize_classmap
from .config import CompilerConfig, validate_config
from .descriptors import (
    AnyDescriptor,
    DescriptorKind,
    DtoDescriptor,
    EnumDescriptor,
    ServiceDescriptor,
)
from .errors import CompilerError, DuplicateMappingError
from .schema import SchemaSet
from .target import TargetLanguage
from ..logging_config import get_logger

logger = get_logger(__name__)


class CompilationResult:
    """Container for compilation results and metadata."""

    def __init__(
        self,
        descriptors: List[AnyDescriptor],
        classmap: "OrderedDict[str, str]",
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize compilation result.

        Args:
            descriptors: Built descriptors in processing order
            classmap: Finalized schema name to generated name table
            warnings: Any warnings from compilation
            metadata: Additional metadata about the run
        """
        self.descriptors = descriptors
        self.classmap = classmap
        self.warnings = warnings or []
        self.metadata = metadata or {}

    def _of_kind(self, kind: DescriptorKind) -> list:
        return [d for d in self.descriptors if d.kind is kind]

    @property
    def enums(self) -> List[EnumDescriptor]:
        return self._of_kind(DescriptorKind.ENUM)

    @property
    def dtos(self) -> List[DtoDescriptor]:
        return self._of_kind(DescriptorKind.DTO)

    @property
    def services(self) -> List[ServiceDescriptor]:
        return self._of_kind(DescriptorKind.SERVICE)

    def get(self, schema_name: str, kind: Optional[DescriptorKind] = None) -> Optional[AnyDescriptor]:
        """Find a descriptor by its schema-qualified name, optionally of one kind."""
        for descriptor in self.descriptors:
            if descriptor.schema_name == schema_name and (kind is None or descriptor.kind is kind):
                return descriptor
        return None

    def serialize_classmap(self) -> str:
        """Render the classmap lookup file for this run."""
        return serialize_classmap(self.classmap, self.metadata.get("document", ""))


class SchemaCompiler:
    """Compiles a schema set into a class model for one target language."""

    def __init__(self, config: CompilerConfig, language: TargetLanguage):
        self.config = config
        self.language = language

    def compile(self, schema_set: SchemaSet) -> CompilationResult:
        """
        Compile every type and service of a schema set.

        Simple types are handled first, then complex types, then services, so
        that services can refer to the names registered before them.

        Raises:
            CompilerError: On the first fatal error; nothing partial is returned
        """
        warnings = validate_config(self.config, self.language.name)
        classmap = ClassmapRegistry()
        builder = ClassModelBuilder(self.config, self.language, schema_set, classmap)
        descriptors: List[AnyDescriptor] = []

        logger.info(
            "Compiling %d types and %d services for %s",
            len(schema_set),
            len(schema_set.services),
            self.language.name,
        )

        try:
            for simple_type in schema_set.simple_types:
                if builder.classifier.is_enum(simple_type):
                    descriptors.append(builder.build_enum(simple_type))
                else:
                    logger.debug("Simple type %s is inlined as a primitive", simple_type.qname)

            for complex_type in schema_set.complex_types:
                descriptors.append(builder.build_dto(complex_type))

            for service in schema_set.services:
                descriptors.append(builder.build_service(service))

            self.check_generated_names(descriptors)
        except CompilerError as e:
            logger.error("Compilation failed: %s", e)
            raise

        table = classmap.finalize()
        warnings.extend(self.validate_descriptors(descriptors, table))

        metadata = {
            "language": self.language.name,
            "file_extension": self.language.file_extension,
            "document": self.config.wsdl_document_path,
            "classmap_name": self.config.classmap_name,
            "type_count": len(schema_set),
            "enum_count": sum(1 for d in descriptors if d.kind is DescriptorKind.ENUM),
            "dto_count": sum(1 for d in descriptors if d.kind is DescriptorKind.DTO),
            "service_count": sum(1 for d in descriptors if d.kind is DescriptorKind.SERVICE),
        }

        for warning in warnings:
            logger.warning(warning)
        logger.info("Built %d descriptors", len(descriptors))

        return CompilationResult(descriptors, table, warnings, metadata)

    def validate_descriptors(self, descriptors: List[AnyDescriptor], table: Dict[str, str]) -> List[str]:
        """
        Check the built model for structural issues.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        generated = set(table.values())

        for descriptor in descriptors:
            if isinstance(descriptor, EnumDescriptor):
                names = [c.name for c in descriptor.constants]
                duplicates = sorted({n for n in names if names.count(n) > 1})
                if duplicates:
                    warnings.append(
                        f"Enum '{descriptor.qualified_name}' has colliding constants: {duplicates}"
                    )

            elif isinstance(descriptor, DtoDescriptor):
                if not descriptor.fields:
                    warnings.append(f"DTO '{descriptor.qualified_name}' has no fields")
                for dto_field in descriptor.fields:
                    field_type = dto_field.type
                    if not field_type.is_primitive and field_type.qualified_name not in generated:
                        warnings.append(
                            f"Field {descriptor.qualified_name}.{dto_field.name} refers to "
                            f"'{field_type.qualified_name}' which is not generated"
                        )

            elif isinstance(descriptor, ServiceDescriptor):
                if not descriptor.methods:
                    warnings.append(f"Service '{descriptor.qualified_name}' has no operations")

        return warnings

    @staticmethod
    def check_generated_names(descriptors: List[AnyDescriptor]) -> None:
        """
        Ensure no two descriptors share a generated qualified name.

        Raises:
            DuplicateMappingError: On the first collision, in processing order
        """
        seen: Dict[str, AnyDescriptor] = {}
        for descriptor in descriptors:
            qualified_name = descriptor.qualified_name
            existing = seen.get(qualified_name)
            if existing is not None:
                raise DuplicateMappingError(
                    qualified_name,
                    f"{existing.kind.value}:{existing.schema_name}",
                    f"{descriptor.kind.value}:{descriptor.schema_name}",
                )
            seen[qualified_name] = descriptor
