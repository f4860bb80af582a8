"""Init command implementation"""

from rich.console import Console
from rich.panel import Panel

from artist_contracts.db import get_database
from artist_contracts.services.seeder import seed_templates

console = Console()


def init_command(seed: bool = True):
    """Initialize database and load the built-in templates"""
    console.print(Panel.fit(
        "[bold blue]Initializing Artist Contracts[/bold blue]",
        border_style="blue"
    ))
    db = get_database()

    console.print("\n[yellow]1. Initializing SQLite database...[/yellow]")
    db.init_db()
    console.print("[green]   [OK] SQLite database initialized[/green]")

    if seed:
        console.print("\n[yellow]2. Loading built-in templates...[/yellow]")
        result = seed_templates(db)
        console.print(
            f"[green]   [OK] {len(result.created)} created, "
            f"{len(result.updated)} updated, {len(result.skipped)} unchanged[/green]"
        )

    console.print(Panel.fit(
        "[bold green][OK] Initialization complete![/bold green]\n\n"
        "Next steps:\n"
        "1. Browse templates: [cyan]artist-contracts templates[/cyan]\n"
        "2. Render the sample: [cyan]artist-contracts sample[/cyan]",
        border_style="green"
    ))
