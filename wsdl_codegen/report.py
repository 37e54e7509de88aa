"""Human-readable compilation summary rendered with rich."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.compiler import CompilationResult
from .core.descriptors import DescriptorKind


def build_descriptor_table(result: CompilationResult) -> Table:
    table = Table(title="Generated classes", show_lines=False)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Class", style="bold")
    table.add_column("Parent", style="dim")
    table.add_column("Members", justify="right")

    for descriptor in result.descriptors:
        if descriptor.kind is DescriptorKind.ENUM:
            members = len(descriptor.constants)
        elif descriptor.kind is DescriptorKind.DTO:
            members = len(descriptor.fields)
        else:
            members = len(descriptor.methods)

        table.add_row(
            descriptor.kind.value,
            escape(descriptor.qualified_name),
            escape(descriptor.parent or ""),
            str(members),
        )

    return table


def build_classmap_table(result: CompilationResult) -> Table:
    table = Table(title="Classmap")
    table.add_column("Schema name", style="green")
    table.add_column("Generated name", style="bold")

    for schema_name, generated_name in result.classmap.items():
        table.add_row(escape(schema_name), escape(generated_name))

    return table


def print_compilation_summary(result: CompilationResult, console: Optional[Console] = None) -> None:
    """
    Print the descriptors, the classmap and any warnings of a compilation run.

    Args:
        result: Compilation result
        console: Console to print to, defaults to a new stdout console
    """
    console = console or Console()

    language = result.metadata.get("language", "?")
    console.print(f"[bold blue]Compilation summary[/bold blue] ({language})")
    console.print(build_descriptor_table(result))
    console.print(build_classmap_table(result))

    if result.warnings:
        console.print(f"[yellow]{len(result.warnings)} warning(s):[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]-[/yellow] {escape(warning)}", highlight=False)
