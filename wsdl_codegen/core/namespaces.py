"""
Namespace inflection.

Translates the target namespace of a schema type into the namespace (module
path) of the generated class. With Apache Axis style enabled, the namespace URI
host is reversed and its path appended, e.g. ``http://api.example.com/v1``
becomes ``com.example.api.v1``.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import urlsplit

from .errors import UnresolvedNamespaceError
from .schema import XSD_NS
from ..logging_config import get_logger

logger = get_logger(__name__)

_URN_SEPARATORS = re.compile(r"[:/]")


class NamespaceCategory(Enum):
    """Sub-namespace segments used with structured namespaces."""

    TYPE = "Type"
    MESSAGE = "Message"
    ENUM = "Enum"


@dataclass(frozen=True)
class NamespaceConfig:
    """Settings driving namespace inflection."""

    base_namespace: str = ""
    axis_style: bool = False
    structured: bool = False
    separator: str = "."


@dataclass(frozen=True)
class Namespace:
    """An ordered tuple of namespace segments."""

    segments: Tuple[str, ...] = field(default_factory=tuple)
    separator: str = "."

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def qualify(self, name: str) -> str:
        """Return the fully qualified form of a name living in this namespace."""
        if self.is_empty:
            return name
        return f"{self}{self.separator}{name}"

    def __str__(self) -> str:
        return self.separator.join(self.segments)


class NamespaceInflector:
    """Helper used to translate a XML namespace into a target namespace."""

    def __init__(self, config: Optional[NamespaceConfig] = None):
        self.config = config or NamespaceConfig()

    def inflect(
        self,
        owner_namespace_uri: Optional[str],
        is_primitive: bool,
        category: Optional[NamespaceCategory] = None,
        type_name: str = "",
    ) -> Namespace:
        """
        Determine the namespace of a generated class.

        Args:
            owner_namespace_uri: Target namespace of the owning schema
            is_primitive: Whether the type is owned by the XMLSchema namespace
            category: Sub-namespace for structured namespaces
            type_name: Used only for error reporting

        Returns:
            The inflected namespace (empty for primitive types)

        Raises:
            UnresolvedNamespaceError: If a non-primitive type has no owner
        """
        # XMLSchema primitive types do not have a namespace
        if is_primitive or owner_namespace_uri == XSD_NS:
            return Namespace((), self.config.separator)

        if not owner_namespace_uri:
            logger.error("Type %s has no owning schema namespace", type_name)
            raise UnresolvedNamespaceError(type_name or "<anonymous>")

        segments = []

        # prepend the base namespace
        if self.config.base_namespace:
            segments.extend(self._split_base(self.config.base_namespace))

        if self.config.axis_style:
            segments.extend(axis_segments(owner_namespace_uri))

        if self.config.structured and category is not None:
            segments.append(category.value)

        return Namespace(tuple(segments), self.config.separator)

    def inflect_qualified_name(
        self,
        owner_namespace_uri: Optional[str],
        name: str,
        is_primitive: bool = False,
        category: Optional[NamespaceCategory] = None,
    ) -> str:
        """Determine the fully qualified name of a generated class."""
        namespace = self.inflect(owner_namespace_uri, is_primitive, category, name)
        return namespace.qualify(name)

    def _split_base(self, base: str) -> list[str]:
        return [part for part in base.split(self.config.separator) if part]


def axis_segments(namespace_uri: str) -> list[str]:
    """
    Split a namespace URI into Apache Axis style segments.

    The host labels are reversed, then the path segments follow. URIs without
    an authority (``urn:acme:orders``) contribute their path segments only.
    """
    parts = urlsplit(namespace_uri)

    if parts.netloc:
        # drop user info and port, keep the label case
        host = parts.netloc.rpartition("@")[2].split(":")[0]
        segments = list(reversed([label for label in host.split(".") if label]))
        segments.extend(part for part in parts.path.split("/") if part)
        return segments

    # no authority: an URN or a bare path
    remainder = parts.path if parts.scheme else namespace_uri
    return [part for part in _URN_SEPARATORS.split(remainder) if part]


def inflect_namespace(
    owner_namespace_uri: Optional[str],
    is_primitive: bool,
    config: NamespaceConfig,
    category: Optional[NamespaceCategory] = None,
) -> Namespace:
    """Convenience function for one-off namespace inflection."""
    return NamespaceInflector(config).inflect(owner_namespace_uri, is_primitive, category)
