"""
Class model builders.

One entry point per artifact kind: enumerations from string-restricted simple
types, data-transfer objects from complex types and service proxies from port
types. Builders only read schema entities and configuration; each registers
the name it produced in the classmap before returning the descriptor.
"""

from typing import List, Optional

from .classmap import ClassmapRegistry
from .config import CompilerConfig
from .descriptors import (
    DtoDescriptor,
    DtoField,
    EnumConstant,
    EnumDescriptor,
    ServiceDescriptor,
    ServiceMethod,
    Visibility,
)
from .inheritance import InheritanceClassifier
from .namespaces import Namespace, NamespaceCategory, NamespaceInflector
from .naming import NameSanitizer
from .schema import XSD_NS, ComplexType, QName, SchemaSet, Service, SimpleType
from .target import TargetLanguage
from .types import ResolvedType, TypeMapper
from ..logging_config import get_logger

logger = get_logger(__name__)


class ClassModelBuilder:
    """Builds class descriptors for one compilation run."""

    def __init__(
        self,
        config: CompilerConfig,
        language: TargetLanguage,
        schema_set: Optional[SchemaSet] = None,
        classmap: Optional[ClassmapRegistry] = None,
        sanitizer: Optional[NameSanitizer] = None,
    ):
        """
        Initialize the builder and the components it drives.

        Args:
            config: Compiler configuration
            language: Target language profile
            schema_set: Loaded types, used to classify and resolve references
            classmap: Registry receiving the produced names
            sanitizer: Name sanitizer, defaults to the language's
        """
        self.config = config
        self.language = language
        self.schema_set = schema_set if schema_set is not None else SchemaSet()
        self.classmap = classmap if classmap is not None else ClassmapRegistry()
        self.sanitizer = sanitizer or language.create_sanitizer(config.strict_identifiers)
        self.inflector = NamespaceInflector(config.namespace_config(language.module_separator))
        self.classifier = InheritanceClassifier(self.schema_set)
        self.type_mapper = TypeMapper(
            language,
            self.inflector,
            self.sanitizer,
            self.schema_set,
            self.classifier,
        )

    # Enumerations

    def build_enum(self, simple_type: SimpleType) -> EnumDescriptor:
        """
        Build an enumeration class from a simple type.

        Each ``enumeration`` facet becomes a constant whose name is sanitized
        and whose value is the literal facet value.
        """
        qname = simple_type.qname
        restriction = simple_type.restriction

        constants = []
        if restriction is not None:
            for facet in restriction.enumerations:
                constants.append(
                    EnumConstant(
                        name=self.sanitizer.sanitize_constant_name(facet.value),
                        value=facet.value,
                        doc=facet.doc,
                    )
                )

        parent = self.config.enum_base_type
        if restriction is not None and restriction.base.namespace != XSD_NS:
            base = self.type_mapper.resolve(restriction.base, NamespaceCategory.ENUM)
            if not base.is_primitive:
                parent = base.qualified_name

        descriptor = EnumDescriptor(
            name=self.sanitizer.sanitize_identifier(qname.name),
            namespace=self._namespace(qname, NamespaceCategory.ENUM),
            schema_name=qname.text,
            parent=parent,
            abstract=simple_type.abstract,
            doc=simple_type.doc,
            xml_namespace=qname.namespace,
            constants=tuple(constants),
        )

        logger.debug("Built enum %s with %d constants", descriptor.qualified_name, len(constants))
        self.classmap.register(qname.text, descriptor.qualified_name)
        return descriptor

    # Data-transfer objects

    def build_dto(self, complex_type: ComplexType) -> DtoDescriptor:
        """
        Build a data-transfer object from a complex type.

        Fields keep the element declaration order, which is also the
        positional order of the constructor arguments.
        """
        qname = complex_type.qname
        namespace = self._namespace(qname, NamespaceCategory.TYPE)
        visibility = Visibility.PROTECTED if self.config.accessors else Visibility.PUBLIC

        dto_fields = []
        references: List[ResolvedType] = []

        for element in complex_type.elements:
            field_type = self.type_mapper.resolve(element.type, NamespaceCategory.TYPE)
            references.append(field_type)
            dto_fields.append(
                DtoField(
                    name=self.sanitizer.sanitize_constant_name(element.name),
                    wire_name=element.name,
                    type=field_type,
                    nullable=element.nillable or self.config.null_constructor_arguments,
                    visibility=visibility,
                    doc=element.doc,
                )
            )

        parent = None
        if complex_type.parent is not None and complex_type.parent.namespace != XSD_NS:
            parent_type = self.type_mapper.resolve(complex_type.parent, NamespaceCategory.TYPE)
            if not parent_type.is_primitive:
                parent = parent_type.qualified_name
                references.append(parent_type)

        descriptor = DtoDescriptor(
            name=self.sanitizer.sanitize_identifier(qname.name),
            namespace=namespace,
            schema_name=qname.text,
            parent=parent,
            abstract=complex_type.abstract,
            doc=complex_type.doc,
            xml_namespace=qname.namespace,
            fields=tuple(dto_fields),
            imports=self._imports(namespace, references),
            accessors=self.config.accessors,
        )

        logger.debug("Built DTO %s with %d fields", descriptor.qualified_name, len(dto_fields))
        self.classmap.register(qname.text, descriptor.qualified_name)
        return descriptor

    # Service proxies

    def build_service(self, service: Service) -> ServiceDescriptor:
        """
        Build a service proxy from a port type.

        One method per operation. The wire operation name is kept verbatim so
        the emitter can generate the remote call.
        """
        qname = service.qname

        methods = []
        for operation in service.operations:
            methods.append(
                ServiceMethod(
                    name=self.sanitizer.sanitize_identifier(operation.name),
                    wire_name=operation.name,
                    parameter_type=self.type_mapper.resolve(operation.input, NamespaceCategory.MESSAGE),
                    return_type=self.type_mapper.resolve(operation.output, NamespaceCategory.MESSAGE),
                    doc=operation.doc,
                )
            )

        descriptor = ServiceDescriptor(
            name=self.sanitizer.sanitize_constant_name(service.name),
            namespace=self._namespace(qname, None),
            schema_name=qname.text,
            parent=self.config.service_base_type,
            doc=service.doc,
            xml_namespace=service.namespace,
            methods=tuple(methods),
            classmap_name=self.config.classmap_name or None,
        )

        logger.debug("Built service %s with %d methods", descriptor.qualified_name, len(methods))
        self.classmap.register_service(qname.text, descriptor.qualified_name)
        return descriptor

    # Helpers

    def _namespace(self, qname: QName, category: Optional[NamespaceCategory]) -> Namespace:
        return self.inflector.inflect(qname.namespace, False, category, qname.name)

    def _imports(self, namespace: Namespace, references: List[ResolvedType]) -> tuple:
        """Qualified names of referenced classes living in another namespace."""
        imports = []
        for reference in references:
            if reference.is_primitive or reference.namespace.segments == namespace.segments:
                continue
            qualified = reference.qualified_name
            if qualified not in imports:
                imports.append(qualified)
        return tuple(imports)
