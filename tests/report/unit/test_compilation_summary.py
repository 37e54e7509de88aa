"""Compilation summary rendering tests."""

from __future__ import annotations

import re
from collections import OrderedDict

from rich.console import Console
from wsdl_codegen.core.descriptors import DtoDescriptor, EnumConstant, EnumDescriptor
from wsdl_codegen.core.compiler import CompilationResult
from wsdl_codegen.core.namespaces import Namespace
from wsdl_codegen.report import (
    build_classmap_table,
    build_descriptor_table,
    print_compilation_summary,
)


def _result() -> CompilationResult:
    color = EnumDescriptor(
        name="Color",
        namespace=Namespace(("shop", "Enum")),
        schema_name="{urn:shop}Color",
        parent="enum.Enum",
        constants=(EnumConstant("RED", "RED"), EnumConstant("GREEN", "GREEN")),
    )
    empty = DtoDescriptor(
        name="Empty",
        namespace=Namespace(("shop", "Type")),
        schema_name="{urn:shop}Empty",
    )
    classmap = OrderedDict(
        [("{urn:shop}Color", "shop.Enum.Color"), ("{urn:shop}Empty", "shop.Type.Empty")]
    )
    return CompilationResult(
        [color, empty],
        classmap,
        warnings=["DTO 'shop.Type.Empty' has no fields [empty]"],
        metadata={"language": "python"},
    )


def _render(result: CompilationResult) -> str:
    console = Console(record=True, width=200, color_system=None)
    print_compilation_summary(result, console)
    return console.export_text()


def test_summary_lists_descriptors_classmap_and_warnings() -> None:
    output = _render(_result())

    assert "Compilation summary (python)" in output
    assert "shop.Enum.Color" in output
    assert "enum.Enum" in output
    assert "{urn:shop}Empty" in output
    assert "1 warning(s):" in output
    assert "has no fields [empty]" in output


def test_summary_without_warnings_has_no_warning_section() -> None:
    result = _result()
    result.warnings = []

    assert "warning(s)" not in _render(result)


def test_classmap_table_has_one_row_per_entry() -> None:
    table = build_classmap_table(_result())

    assert table.row_count == 2


def _row_cells(text: str, marker: str) -> list[str]:
    row = next(line for line in text.splitlines() if marker in line)
    return [cell.strip() for cell in re.split(r"[│|]", row) if cell.strip()]


def test_descriptor_table_counts_members_per_kind() -> None:
    console = Console(record=True, width=200, color_system=None)
    console.print(build_descriptor_table(_result()))
    text = console.export_text()

    assert _row_cells(text, "shop.Enum.Color") == ["enum", "shop.Enum.Color", "enum.Enum", "2"]
    assert _row_cells(text, "shop.Type.Empty") == ["dto", "shop.Type.Empty", "0"]
