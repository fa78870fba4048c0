"""CLI for the form-gate field validation engine."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from form_gate import __version__
from form_gate.checking import PayloadChecker
from form_gate.config import get_form_registry_path
from form_gate.definitions import FormDefinitionRegistry
from form_gate.diagnostics import CheckStatus
from form_gate.errors import FormGateError
from form_gate.logging_utils import configure_logging

app = typer.Typer(
    name="form-gate",
    help="Field validation and form submission engine.",
    no_args_is_help=True,
)
console = Console()

DEFAULT_SCHEMA_PATH = Path("schemas") / "form_definition.schema.json"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"form-gate version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """form-gate: field validation and form submission engine."""
    configure_logging(verbose)


def _load_registry(registry: Path | None) -> FormDefinitionRegistry:
    registry_path = get_form_registry_path(registry)
    if not registry_path.exists():
        console.print(f"[red]Error:[/red] Form registry not found: {registry_path}")
        raise typer.Exit(1)
    schema_path = DEFAULT_SCHEMA_PATH if DEFAULT_SCHEMA_PATH.exists() else None
    return FormDefinitionRegistry(registry_path, schema_path=schema_path)


@app.command()
def check(
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of payloads"),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output JSONL file of diagnostics"),
    ],
    form: Annotated[
        str,
        typer.Option("--form", "-f", help="Form definition ID (required)"),
    ],
    form_version: Annotated[
        str | None,
        typer.Option("--form-version", help="Form definition version (default: latest)"),
    ] = None,
    registry: Annotated[
        Path | None,
        typer.Option(
            "--registry",
            envvar="FORM_GATE_REGISTRY",
            help="Path to form registry",
        ),
    ] = None,
) -> None:
    """Check payloads against a form definition and emit diagnostics.

    Each input line is a JSON object mapping field id to raw value. Every
    payload is validated the way a submission attempt would be; nothing
    is sent anywhere.
    """
    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    form_registry = _load_registry(registry)
    try:
        definition = form_registry.resolve(form, form_version)
    except FormGateError as e:
        console.print(f"\n[red]Error loading form definition:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold]form-gate[/bold] v{__version__}")
    console.print(f"  Input: {input_path}")
    console.print(f"  Output: {output_path}")
    console.print(f"  Form: {definition.form_id}@{definition.version}")
    console.print(f"  Registry: {form_registry.registry_path}")

    checker = PayloadChecker(definition, form_registry.validators)
    valid_count = 0
    invalid_count = 0
    skipped_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Checking payloads...", total=None)

        with open(input_path) as f_in, open(output_path, "w") as f_out:
            for line_num, line in enumerate(f_in, 1):
                line = line.strip()
                if not line:
                    continue

                try:
                    payload = json.loads(line)
                except json.JSONDecodeError as e:
                    console.print(
                        f"\n[yellow]Warning:[/yellow] Invalid JSON on line {line_num}: {e}"
                    )
                    skipped_count += 1
                    continue
                if not isinstance(payload, dict):
                    console.print(
                        f"\n[yellow]Warning:[/yellow] Line {line_num} is not a JSON object"
                    )
                    skipped_count += 1
                    continue

                diagnostic = checker.check(payload, index=line_num)
                f_out.write(diagnostic.model_dump_json() + "\n")

                if diagnostic.status == CheckStatus.VALID:
                    valid_count += 1
                else:
                    invalid_count += 1

                progress.update(task, description=f"Checked {line_num} payloads...")

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Payloads checked: {valid_count + invalid_count}")
    console.print(f"  [green]Valid:[/green] {valid_count}")
    if invalid_count:
        console.print(f"  [red]Invalid:[/red] {invalid_count}")
    if skipped_count:
        console.print(f"  [yellow]Skipped:[/yellow] {skipped_count}")


@app.command()
def show(
    form: Annotated[str, typer.Argument(help="Form definition ID")],
    form_version: Annotated[
        str | None,
        typer.Option("--form-version", help="Form definition version (default: latest)"),
    ] = None,
    registry: Annotated[
        Path | None,
        typer.Option("--registry", envvar="FORM_GATE_REGISTRY", help="Path to form registry"),
    ] = None,
) -> None:
    """Show the fields and rules of a form definition."""
    form_registry = _load_registry(registry)
    try:
        definition = form_registry.resolve(form, form_version)
    except FormGateError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"{definition.form_id}@{definition.version}")
    table.add_column("Field")
    table.add_column("Label")
    table.add_column("Variant")
    table.add_column("Required")
    table.add_column("Whitespace")
    table.add_column("Validation")

    for field in definition.fields:
        args = ", ".join(f"{k}={v}" for k, v in field.validation_args.items())
        table.add_row(
            field.field_id,
            field.label,
            field.variant.value,
            "yes" if field.required else "no",
            field.whitespace.value,
            f"{field.validation}({args})" if args else field.validation,
        )
    console.print(table)

    for rule in definition.rules:
        console.print(f"  Rule: {rule.field_id} {rule.kind} {rule.other}")


@app.command()
def validate(
    definition_path: Annotated[
        Path,
        typer.Argument(help="Path to the form definition file"),
    ],
    schema_path: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="Path to the schema file"),
    ] = None,
) -> None:
    """Validate a form definition file against its schema."""
    import jsonschema

    if not definition_path.exists():
        console.print(f"[red]Error:[/red] Definition file not found: {definition_path}")
        raise typer.Exit(1)

    schema_path = schema_path or DEFAULT_SCHEMA_PATH
    if not schema_path.exists():
        console.print(f"[red]Error:[/red] Schema file not found: {schema_path}")
        raise typer.Exit(1)

    with open(definition_path) as f:
        definition = json.load(f)

    with open(schema_path) as f:
        schema = json.load(f)

    try:
        jsonschema.validate(definition, schema)
        console.print(f"[green]Valid:[/green] {definition_path}")
    except jsonschema.ValidationError as e:
        console.print(f"[red]Invalid:[/red] {e.message}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
