"""reggen CLI — the main entry point for the registry index generator."""

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reggen import __version__
from reggen.utils.logging_utils import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """reggen — registry index generator.

    Validate per-package entry files and compile them into the
    registry's lookup index.
    """
    configure_logging(verbose=verbose)


# ── Build ────────────────────────────────────────────────────────────


@main.command()
@click.option(
    "--input", "-i", "input_dir",
    default="entries", envvar="REGGEN_INPUT", show_default=True,
    help="Input directory of entry files",
)
@click.option(
    "--output", "-o",
    default="index.json", envvar="REGGEN_OUTPUT", show_default=True,
    help="Output index file",
)
@click.option("--keep-going", is_flag=True, help="Skip invalid entries instead of aborting")
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Pretty-print with N spaces")
def build(input_dir: str, output: str, keep_going: bool, indent: int | None):
    """Compile an entries directory into an index file."""
    from reggen.exceptions import RegistryGeneratorError
    from reggen.registry.loader import generate_index

    if not input_dir:
        raise click.UsageError("input directory is not specified")
    if not output:
        raise click.UsageError("output file is not specified")

    try:
        result, document = generate_index(
            input_dir, output, keep_going=keep_going, indent=indent
        )
    except RegistryGeneratorError as e:
        console.print(f"[red]error:[/] {escape(str(e))}")
        sys.exit(1)

    for failure in result.failures:
        console.print(f"  [yellow]skipped[/] {escape(str(failure))}")

    console.print(f"[green]index file generated[/] ({len(document.index)} entries) -> {escape(output)}")
    if not result.ok:
        sys.exit(1)


# ── Validate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("entry_paths", nargs=-1, required=True)
def validate(entry_paths: tuple):
    """Validate one or more entry files against their schema."""
    from reggen.utils.validator import validate_entry_file

    table = Table(title=f"Entry validation ({len(entry_paths)} files)")
    table.add_column("File", style="cyan")
    table.add_column("Valid", justify="center")
    table.add_column("Issues")

    failed = 0
    for entry_path in entry_paths:
        issues = validate_entry_file(entry_path)
        if issues:
            failed += 1
            table.add_row(escape(entry_path), "[red]N[/]", escape("\n".join(issues)))
        else:
            table.add_row(escape(entry_path), "[green]Y[/]", "")

    console.print(table)
    if failed:
        sys.exit(1)


# ── Schema ───────────────────────────────────────────────────────────


@main.command(name="schema")
@click.argument("kind", type=click.Choice(["tooth", "alias"]))
def dump_schema(kind: str):
    """Print the JSON Schema for an entry kind."""
    from reggen.spec.schema import get_schema

    click.echo(json.dumps(get_schema(kind), indent=2))


if __name__ == "__main__":
    main()
