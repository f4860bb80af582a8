"""Main CLI application"""

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from artist_contracts.cli.init_cmd import init_command
from artist_contracts.models import ContractTemplate, TemplateCategory, TemplateFormData

app = typer.Typer(
    name="artist-contracts",
    help="Contract templates for artists: validate, render and generate agreements",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def _generator():
    from artist_contracts.db import get_database
    from artist_contracts.services.generator import ContractGenerator

    db = get_database()
    db.init_db()
    return ContractGenerator(db)


def _resolve(key: str) -> ContractTemplate:
    from artist_contracts.services.exceptions import TemplateNotFoundError

    try:
        return _generator().find_template(key)
    except TemplateNotFoundError:
        _fail(
            f"Template '{key}' not found. "
            "Run [cyan]artist-contracts seed[/cyan] to load the built-in templates."
        )


def _load_form_data(path: Path) -> TemplateFormData:
    """Read form data from a JSON file.

    Accepts {"fields": ..., "enabled_clauses": ...} or the same object
    wrapped in a "form_data" key.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _fail(f"Data file not found: {path}")
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {path}: {e}")

    if isinstance(data, dict) and "form_data" in data:
        data = data["form_data"]
    try:
        return TemplateFormData.model_validate(data)
    except ValidationError as e:
        _fail(f"Invalid form data in {path}: {e}")


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


@app.command("init")
def init(
    no_seed: bool = typer.Option(False, "--no-seed", help="Only create the schema"),
):
    """Initialize database and load built-in templates"""
    init_command(seed=not no_seed)


@app.command("seed")
def seed(
    no_update: bool = typer.Option(False, "--no-update", help="Never replace stored templates"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Load built-in templates, upgrading stored ones with older versions"""
    from artist_contracts.db import get_database
    from artist_contracts.services.seeder import seed_templates

    db = get_database()
    db.init_db()
    result = seed_templates(db, update=not no_update)

    if json_output:
        _print_json(result.model_dump())
        return

    for name in result.created:
        console.print(f"  [green][CREATED][/green] {name}")
    for name in result.updated:
        console.print(f"  [blue][UPDATED][/blue] {name}")
    for name in result.skipped:
        console.print(f"  [dim][SKIPPED][/dim] {name}")
    console.print(
        f"\n[green][OK] {len(result.created)} created, {len(result.updated)} updated, "
        f"{len(result.skipped)} unchanged[/green]"
    )


@app.command("templates")
def templates(
    category: Optional[TemplateCategory] = typer.Option(None, "--category", "-c", help="Filter by category"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search name and description"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """List available contract templates"""
    template_list = _generator().list_templates(
        category=category.value if category else None,
        search=search,
    )

    if json_output:
        _print_json([
            {"id": t.id, "name": t.name, "category": t.category.value, "version": t.version}
            for t in template_list
        ])
        return

    if not template_list:
        console.print("[yellow]No templates available[/yellow]")
        console.print("Run [cyan]artist-contracts seed[/cyan] to load the built-in templates.")
        return

    table = Table(title="Available Contract Templates")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="green")
    table.add_column("Category", style="cyan")
    table.add_column("Description")
    table.add_column("Fields", justify="right")
    table.add_column("Clauses", justify="right")

    for template in template_list:
        table.add_row(
            template.id,
            template.name,
            template.category.value,
            template.description[:40] + "..." if len(template.description) > 40 else template.description,
            str(len(template.fields)),
            str(len(template.optional_clauses)),
        )

    console.print(table)
    console.print("\nUse [cyan]artist-contracts template <name> --fields[/cyan] to see the form fields")


@app.command("template")
def template_detail(
    key: str = typer.Argument(..., help="Template id or name"),
    fields: bool = typer.Option(False, "--fields", "-f", help="Show form fields and clauses"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show template details"""
    template = _resolve(key)

    if json_output:
        _print_json(template.model_dump(mode="json"))
        return

    console.print(Panel(
        f"[bold]{template.name}[/bold]\n\n{template.description}\n\n"
        f"Category: {template.category.value}   Version: {template.version}",
        title=f"Template: {template.id}",
        border_style="blue",
    ))

    if not fields:
        return

    table = Table(title="Fields")
    table.add_column("Field", style="cyan")
    table.add_column("Label", style="green")
    table.add_column("Type")
    table.add_column("Required")
    table.add_column("Clause", style="dim")

    for field in template.fields:
        table.add_row(field.id, field.label, field.type.value, "Yes" if field.required else "No", "")
    for clause in template.optional_clauses:
        for field in clause.fields:
            table.add_row(
                field.id, field.label, field.type.value,
                "Yes" if field.required else "No", clause.id,
            )
    console.print(table)

    clauses = Table(title="Optional Clauses")
    clauses.add_column("Clause", style="cyan")
    clauses.add_column("Name", style="green")
    clauses.add_column("Default")
    clauses.add_column("Description")
    for clause in template.optional_clauses:
        clauses.add_row(clause.id, clause.name, "On" if clause.default_enabled else "Off", clause.description)
    console.print(clauses)


@app.command("variables")
def variables(
    key: str = typer.Argument(..., help="Template id or name"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """List the {{placeholders}} a template uses, in document order"""
    from artist_contracts.services.renderer import extract_variables

    names = extract_variables(_resolve(key).content)
    if json_output:
        _print_json(names)
        return
    for name in names:
        console.print(f"  {{{{{name}}}}}", markup=False)


@app.command("check")
def check(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Check the built-in template definitions for authoring mistakes"""
    from artist_contracts.data.templates import ALL_TEMPLATES
    from artist_contracts.services.validation import validate_template_structure

    results = {t.name: validate_template_structure(t) for t in ALL_TEMPLATES}
    failed = [name for name, result in results.items() if not result.valid]

    if json_output:
        _print_json({name: result.model_dump() for name, result in results.items()})
    else:
        for name, result in results.items():
            if result.valid:
                console.print(f"  [green][OK][/green] {name}")
                continue
            console.print(f"  [red][FAIL][/red] {name}")
            for error in result.errors:
                console.print(f"      - {error}", markup=False)

    if failed:
        raise typer.Exit(code=1)


@app.command("validate")
def validate(
    key: str = typer.Argument(..., help="Template id or name"),
    data: Path = typer.Option(..., "--data", "-d", help="JSON file with form data"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Validate form data against a template"""
    from artist_contracts.services.validation import validate_form_data

    template = _resolve(key)
    result = validate_form_data(template, _load_form_data(data))

    if json_output:
        _print_json(result.model_dump())
    elif result.valid:
        console.print(f"[green][OK] Form data is valid for {template.name}[/green]")
    else:
        table = Table(title=f"Validation errors: {template.name}")
        table.add_column("Field", style="cyan")
        table.add_column("Error", style="red")
        for field_id, message in result.errors.items():
            table.add_row(field_id, message)
        console.print(table)

    if not result.valid:
        raise typer.Exit(code=1)


@app.command("render")
def render(
    key: str = typer.Argument(..., help="Template id or name"),
    data: Path = typer.Option(..., "--data", "-d", help="JSON file with form data"),
    output_format: str = typer.Option("text", "--format", "-F", help="Output format: html or text"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
    no_styles: bool = typer.Option(False, "--no-styles", help="Omit the embedded stylesheet (html only)"),
):
    """Render a contract from a template and form data (no validation)"""
    if output_format not in ("html", "text"):
        _fail(f"Unknown format: {output_format}. Use html or text.")

    template = _resolve(key)
    preview = _generator().preview(template.id, _load_form_data(data), include_styles=not no_styles)
    document = preview.html if output_format == "html" else preview.text

    if preview.missing_variables:
        err_console.print(
            f"[yellow]Unfilled placeholders: {', '.join(preview.missing_variables)}[/yellow]",
            highlight=False,
        )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
        console.print(f"[green][OK] Contract written: {output}[/green]")
    else:
        print(document)


@app.command("sample")
def sample(
    output_format: str = typer.Option("text", "--format", "-F", help="Output format: html or text"),
):
    """Render the Artist Collaboration Agreement with sample data"""
    from artist_contracts.data.templates import ARTIST_AGREEMENT, ARTIST_AGREEMENT_SAMPLE_DATA
    from artist_contracts.services.output import generate_html, generate_text
    from artist_contracts.services.renderer import render_template_content

    if output_format not in ("html", "text"):
        _fail(f"Unknown format: {output_format}. Use html or text.")

    document = render_template_content(ARTIST_AGREEMENT, ARTIST_AGREEMENT_SAMPLE_DATA)
    if output_format == "html":
        print(generate_html(document.title, document.sections))
    else:
        print(generate_text(document.title, document.sections))


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default: API_PORT)"),
):
    """Run the HTTP API server"""
    import uvicorn

    from artist_contracts.api.app import create_app
    from artist_contracts.utils.config import get_settings

    settings = get_settings()
    uvicorn.run(create_app(), host=host or settings.api_host, port=port or settings.api_port)


@app.command("status")
def status():
    """Show database status"""
    from artist_contracts.db import get_database

    info = get_database().get_status()
    table = Table(title=f"Database Status ({info['mode']})")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for k, v in info.items():
        table.add_row(str(k), str(v))
    console.print(table)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Configure logging before any command runs"""
    from artist_contracts.utils.log import setup_logging

    setup_logging(log_level)


if __name__ == "__main__":
    app()
