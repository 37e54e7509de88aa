"""
Restriction chain analysis for simple types.

Walks the restriction/base chain of a simple type down to its terminal
built-in ancestor and decides whether the type becomes an enumeration.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import CyclicRestrictionChainError
from .schema import ANY_SIMPLE_TYPE, QName, Restriction, SchemaSet, SimpleType, xsd
from ..logging_config import get_logger

logger = get_logger(__name__)

MAX_CHAIN_LENGTH = 64

STRING_TYPE = xsd("string")


@dataclass(frozen=True)
class Classification:
    """Result of walking a simple type's restriction chain."""

    is_enum: bool
    terminal_base: Optional[QName]
    chain: Tuple[QName, ...] = field(default_factory=tuple)


class InheritanceClassifier:
    """Classifies simple types by their terminal primitive ancestor."""

    def __init__(self, schema_set: Optional[SchemaSet] = None, max_chain_length: int = MAX_CHAIN_LENGTH):
        self.schema_set = schema_set
        self.max_chain_length = max_chain_length

    def restriction_chain(self, simple_type: SimpleType) -> list[Restriction]:
        """
        Build the inheritance chain of a simple type.

        The link pointing at ``anySimpleType`` is discarded, so the base of the
        last returned restriction is the terminal built-in type.

        Raises:
            CyclicRestrictionChainError: If the chain exceeds the length bound
        """
        chain: list[Restriction] = []
        visited = [simple_type.qname.text]
        restriction = simple_type.restriction

        while restriction is not None and restriction.base != ANY_SIMPLE_TYPE:
            chain.append(restriction)
            visited.append(restriction.base.text)

            if len(chain) > self.max_chain_length:
                logger.error("Restriction chain of %s does not terminate", simple_type.qname)
                raise CyclicRestrictionChainError(simple_type.qname.text, visited)

            base = self.schema_set.get(restriction.base) if self.schema_set else None
            restriction = base.restriction if isinstance(base, SimpleType) else None

        return chain

    def classify(self, simple_type: SimpleType) -> Classification:
        """
        Determine the terminal base of a simple type and whether it is an enum.

        Enums are built only of string enumerations: the terminal base must be
        ``xsd:string`` and the type itself must declare an enumeration facet.
        """
        chain = self.restriction_chain(simple_type)

        # the type is itself the terminal
        if not chain:
            return Classification(False, simple_type.qname, ())

        terminal = chain[-1].base
        own = simple_type.restriction
        is_enum = terminal == STRING_TYPE and own is not None and bool(own.enumerations)

        return Classification(is_enum, terminal, tuple(r.base for r in chain))

    def is_enum(self, simple_type: SimpleType) -> bool:
        return self.classify(simple_type).is_enum
