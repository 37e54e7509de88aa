"""
Compiler error taxonomy.

Every error raised while mapping a schema set onto a class model is fatal for
the current compilation run.
"""


class CompilerError(Exception):
    """Base exception for class model compilation errors."""

    pass


class InvalidIdentifierError(CompilerError):
    """Raised in strict identifier mode when a name would need repairing."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid identifier '{identifier}': {reason}")


class UnresolvedNamespaceError(CompilerError):
    """Raised when a non-primitive type has no owning schema namespace."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"Cannot determine the owning namespace of type '{type_name}'"
        )


class CyclicRestrictionChainError(CompilerError):
    """Raised when a restriction chain does not reach a terminal type."""

    def __init__(self, type_name: str, chain: list[str]):
        self.type_name = type_name
        self.chain = chain
        super().__init__(
            f"Restriction chain of '{type_name}' does not terminate: "
            f"{' -> '.join(chain)}"
        )


class DuplicateMappingError(CompilerError):
    """Raised when two schema names claim the same generated class name."""

    def __init__(
        self,
        generated_name: str,
        existing_schema_name: str,
        schema_name: str,
        message: str | None = None,
    ):
        self.generated_name = generated_name
        self.existing_schema_name = existing_schema_name
        self.schema_name = schema_name
        super().__init__(
            message
            or f"Generated name '{generated_name}' is already mapped from "
            f"'{existing_schema_name}', cannot map it from '{schema_name}'"
        )


class ClassmapFormatError(CompilerError):
    """Raised when a classmap table cannot be serialized or parsed."""

    pass
