"""Command-line interface for ts3codegen code generation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from ts3codegen.generator import load, python
from ts3codegen.generator.codecs import python_type

if TYPE_CHECKING:
    from ts3codegen.generator.types import Declarations


@click.group()
def cli() -> None:
    """TeamSpeak message code generator."""


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input declaration file")
@click.option("--output", "-o", "output_file", required=True, help="Output file")
@click.option(
    "--runtime-import",
    "runtime_import",
    is_flag=False,
    flag_value="ts3codegen.proto",
    default=None,
    help="Import path for runtime. No value=ts3codegen.proto, omit=ts3_runtime",
)
def gen(input_file: str, output_file: str, runtime_import: str | None) -> None:
    """Generate Python message code from a declaration file."""
    decls = load(input_file)

    # Default to "ts3_runtime" (a runtime folder next to the output) if not specified
    import_path = runtime_import if runtime_import is not None else "ts3_runtime"
    generated_file = python.render(decls, runtime_import=import_path)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(generated_file)


@cli.command()
@click.option("--output", "-o", "output_path", default=".", help="Output directory")
@click.option("--name", default="ts3_runtime", help="Runtime folder name")
def runtime(output_path: str, name: str) -> None:
    """Generate runtime support code."""
    runtime_dir = Path(output_path) / name
    runtime_dir.mkdir(parents=True, exist_ok=True)
    for filename, content in python.runtime().items():
        (runtime_dir / filename).write_text(content)
    print(f"Generated Python runtime in {runtime_dir}")


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input declaration file")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display messages, fields and notifications of a declaration file."""
    decls = load(input_file)

    if output_json:
        _output_json(decls)
    else:
        _output_plain(decls)


def _flags(is_response: bool, is_notify: bool) -> str:
    flags = []
    if is_response:
        flags.append("response")
    if is_notify:
        flags.append("notify")
    return ", ".join(flags)


def _output_json(decls: Declarations) -> None:
    """Output declaration info as JSON."""
    variants = {n.message: n.variant_name for n in decls.notifies}
    data: dict = {"fields": {}, "messages": {}, "notifications": {}}

    for f in decls.fields:
        data["fields"][f.generated_name] = {
            "wire_name": f.wire_name,
            "type": python_type(f),
        }

    for msg in decls.messages:
        data["messages"][msg.record_name] = {
            "command": msg.notify_name,
            "params": msg.params,
            "response": msg.is_response,
            "notify": msg.is_notify,
            "variant": variants.get(msg.record_name),
        }

    messages = decls.message_map()
    for n in decls.notifies:
        data["notifications"][messages[n.message].notify_name] = n.variant_name

    print(json.dumps(data, indent=2))


def _output_plain(decls: Declarations) -> None:
    """Output declaration info using rich text formatting."""
    console = Console()
    variants = {n.message: n.variant_name for n in decls.notifies}

    console.print("[bold cyan]Messages[/bold cyan]")
    message_table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    message_table.add_column("Name", style="white")
    message_table.add_column("Command", style="yellow")
    message_table.add_column("Fields", style="white", justify="right")
    message_table.add_column("Flags", style="dim")
    message_table.add_column("Variant", style="green")

    for msg in decls.messages:
        message_table.add_row(
            msg.record_name,
            msg.notify_name,
            str(len(msg.params)),
            _flags(msg.is_response, msg.is_notify),
            variants.get(msg.record_name, ""),
        )

    console.print(message_table)
    console.print()

    console.print("[bold cyan]Fields[/bold cyan]")
    field_table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    field_table.add_column("Name", style="white")
    field_table.add_column("Wire name", style="yellow")
    field_table.add_column("Type", style="dim")

    for f in decls.fields:
        field_table.add_row(f.generated_name, f.wire_name, python_type(f))

    console.print(field_table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
