"""Admin command for initializing the ledger and configuration."""

import sqlite3
import sys
from pathlib import Path

from rich.console import Console

from cashdesk.config import ConfigError, create_default_config, load_config
from cashdesk.store.schema import init_database

console = Console()


def init_command(config_path: Path, force: bool = False) -> None:
    """Create a default config file and an empty ledger database.

    An existing config is kept unless force is set; its db_path decides
    where the database is created.
    """
    try:
        if config_path.exists() and not force:
            console.print(f"[dim]Using existing config: {config_path}[/dim]")
        else:
            console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
            create_default_config(config_path)
            console.print("[green]✓[/green] Config file created (permissions: 600)")

        config = load_config(config_path)

        if config.db_path.exists() and not force:
            console.print("[red]Initialization failed:[/red]", style="bold")
            console.print(f"  Database already exists: {config.db_path}")
            console.print("\n[yellow]Use 'cashdesk init --force' to re-run schema setup[/yellow]")
            sys.exit(1)

        console.print(f"[cyan]Initializing database at {config.db_path}...[/cyan]")
        init_database(config.db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print("\n[green]Initialization complete![/green]", style="bold")
        console.print(f"[dim]Database: {config.db_path}[/dim]")
        console.print(f"[dim]Config: {config_path}[/dim]")

    except ConfigError as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
