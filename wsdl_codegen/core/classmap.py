"""
Classmap registry.

Accumulates the mapping from schema-qualified type names to generated
fully-qualified class names. The finalized table is handed to the emitter and
serialized as a flat lookup file used by generated service clients at runtime.
"""

import threading
from collections import OrderedDict
from typing import Dict, Mapping, Optional

from .errors import ClassmapFormatError, DuplicateMappingError
from .templates import TemplateError, get_default_template_engine
from ..logging_config import get_logger

logger = get_logger(__name__)

CLASSMAP_TEMPLATE_NAME = "classmap.ini"
KEY_VALUE_SEPARATOR = " = "
COMMENT_PREFIXES = (";", "#")
SERVICE_OWNER_PREFIX = "service:"


class ClassmapRegistry:
    """Append-only registry of schema name to generated name mappings.

    Types and services live in separate key spaces, since a port type may
    share its qualified name with a schema type. Generated names are unique
    across both.
    """

    def __init__(self):
        self._entries: "OrderedDict[str, str]" = OrderedDict()
        self._services: "OrderedDict[str, str]" = OrderedDict()
        self._owners: Dict[str, str] = {}  # generated name -> owner label
        self._lock = threading.Lock()

    def register(self, schema_name: str, generated_name: str) -> bool:
        """
        Register a type mapping.

        Re-registering an identical pair is a no-op.

        Args:
            schema_name: Schema-qualified name (Clark notation)
            generated_name: Fully-qualified generated class name

        Returns:
            True if the pair was added, False if it was already known

        Raises:
            DuplicateMappingError: If either name is already mapped differently
        """
        with self._lock:
            return self._add(self._entries, schema_name, schema_name, generated_name)

    def register_service(self, schema_name: str, generated_name: str) -> bool:
        """
        Register a service class.

        Service entries claim their generated name but stay out of the type
        table returned by :meth:`finalize`.

        Raises:
            DuplicateMappingError: If either name is already mapped differently
        """
        with self._lock:
            owner = f"{SERVICE_OWNER_PREFIX}{schema_name}"
            return self._add(self._services, schema_name, owner, generated_name)

    def _add(self, entries: Dict[str, str], schema_name: str, owner: str, generated_name: str) -> bool:
        claimed_by = self._owners.get(generated_name)
        if claimed_by is not None and claimed_by != owner:
            logger.error(
                "Generated name %s claimed by both %s and %s",
                generated_name,
                claimed_by,
                owner,
            )
            raise DuplicateMappingError(generated_name, claimed_by, owner)

        current = entries.get(schema_name)
        if current is not None and current != generated_name:
            logger.error("Schema name %s already mapped to %s", owner, current)
            raise DuplicateMappingError(
                generated_name,
                owner,
                owner,
                message=(
                    f"Schema name '{owner}' is already mapped to "
                    f"'{current}', cannot map it to '{generated_name}'"
                ),
            )

        if current is not None:
            return False

        entries[schema_name] = generated_name
        self._owners[generated_name] = owner
        logger.debug("Registered %s -> %s", owner, generated_name)
        return True

    def lookup(self, schema_name: str) -> Optional[str]:
        return self._entries.get(schema_name)

    def lookup_service(self, schema_name: str) -> Optional[str]:
        return self._services.get(schema_name)

    def finalize(self) -> "OrderedDict[str, str]":
        """Return the accumulated type table in registration order."""
        with self._lock:
            return OrderedDict(self._entries)

    def services(self) -> "OrderedDict[str, str]":
        """Return the registered service classes in registration order."""
        with self._lock:
            return OrderedDict(self._services)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, schema_name: str) -> bool:
        return schema_name in self._entries


def _check_entry(schema_name: str, generated_name: str) -> None:
    for label, text in (("key", schema_name), ("value", generated_name)):
        if not text:
            raise ClassmapFormatError(f"Empty classmap {label}")
        if "\n" in text or "\r" in text:
            raise ClassmapFormatError(f"Classmap {label} spans several lines: {text!r}")
        if text != text.strip():
            raise ClassmapFormatError(f"Classmap {label} has surrounding whitespace: {text!r}")
        if KEY_VALUE_SEPARATOR in text:
            raise ClassmapFormatError(f"Classmap {label} contains the separator: {text!r}")

    if schema_name.startswith(COMMENT_PREFIXES):
        raise ClassmapFormatError(f"Classmap key reads as a comment: {schema_name!r}")


def serialize_classmap(table: Mapping[str, str], document_locator: str = "") -> str:
    """
    Render a classmap table as an ini-style lookup file.

    Args:
        table: Finalized classmap, in registration order
        document_locator: Label of the input document, written as a header

    Returns:
        The serialized classmap

    Raises:
        ClassmapFormatError: If an entry cannot be represented
    """
    if "\n" in document_locator or "\r" in document_locator:
        raise ClassmapFormatError("Document locator must be a single line")

    for schema_name, generated_name in table.items():
        _check_entry(schema_name, generated_name)

    header = f"@service {document_locator}" if document_locator else ""
    try:
        rendered = get_default_template_engine().render_template(
            CLASSMAP_TEMPLATE_NAME,
            {"header": header, "entries": list(table.items())},
        )
    except TemplateError as e:
        raise ClassmapFormatError(f"Failed to serialize classmap: {e}") from e

    return rendered.lstrip("\n") + "\n"


def parse_classmap(text: str) -> "OrderedDict[str, str]":
    """
    Read back a serialized classmap.

    Blank lines and comment lines are skipped.

    Raises:
        ClassmapFormatError: On malformed or duplicate entries
    """
    table: "OrderedDict[str, str]" = OrderedDict()

    # only "\n" ends an entry; other Unicode line breaks are legal inside names
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip() or line.startswith(COMMENT_PREFIXES):
            continue

        schema_name, separator, generated_name = line.partition(KEY_VALUE_SEPARATOR)
        if not separator:
            raise ClassmapFormatError(f"Line {lineno}: missing '{KEY_VALUE_SEPARATOR.strip()}'")

        _check_entry(schema_name, generated_name)
        if schema_name in table:
            raise ClassmapFormatError(f"Line {lineno}: duplicate key {schema_name!r}")
        table[schema_name] = generated_name

    return table
