"""CLI entry point for cashdesk."""

import sys
import tomllib
from pathlib import Path

import typer
from rich.console import Console

from cashdesk.commands.admin import init_command
from cashdesk.commands.interactive import interactive_command
from cashdesk.commands.report import accounts_command, balances_command, shame_command
from cashdesk.config import Config, ConfigError, get_config_path, load_config
from cashdesk.logging_config import configure_logging
from cashdesk.store.ledger import SqliteLedger
from cashdesk.store.schema import database_exists

app = typer.Typer(
    name="cashdesk",
    help="cashdesk - record payments against a shared cash ledger",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default: ~/.config/cashdesk/config.toml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """cashdesk - record payments against a shared cash ledger."""
    configure_logging(verbose=verbose)
    ctx.obj = config or get_config_path()


def _load(config_path: Path) -> tuple[SqliteLedger, Config]:
    """Load the config and open the ledger it points to, exiting on failure."""
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        console.print(f"[red]Config not found: {config_path}. Run 'cashdesk init' first.[/red]", style="bold")
        sys.exit(1)
    except (tomllib.TOMLDecodeError, ConfigError) as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)

    if not database_exists(config.db_path):
        console.print(f"[red]Database not found: {config.db_path}. Run 'cashdesk init' first.[/red]", style="bold")
        sys.exit(1)

    return SqliteLedger(config.db_path, author=config.name), config


@app.command(name="init")
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config and re-run schema setup"),
) -> None:
    """Initialize cashdesk database and configuration."""
    init_command(ctx.obj, force)


@app.command()
def accounts(ctx: typer.Context) -> None:
    """List all accounts."""
    ledger, _ = _load(ctx.obj)
    accounts_command(ledger)


@app.command()
def balances(ctx: typer.Context) -> None:
    """List all account balances."""
    ledger, config = _load(ctx.obj)
    balances_command(ledger, config)


@app.command()
def shame(ctx: typer.Context) -> None:
    """List all user accounts with negative balances."""
    ledger, config = _load(ctx.obj)
    shame_command(ledger, config)


@app.command()
def cli(ctx: typer.Context) -> None:
    """Interactive CLI for recording payments."""
    ledger, config = _load(ctx.obj)
    interactive_command(ledger, config)


if __name__ == "__main__":
    app()
