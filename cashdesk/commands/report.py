"""Report commands for viewing accounts and balances."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cashdesk.config import Config
from cashdesk.domain.models import Account, Ledger, LedgerError, Money
from cashdesk.domain.report import format_money, negative_user_balances

console = Console()


def _balance_table(title: str, balances: list[tuple[Account, Money]], currency: str) -> Table:
    table = Table(title=title)
    table.add_column("Account", style="cyan")
    table.add_column("Balance", justify="right")
    table.add_column("Type", style="dim")

    for account, balance in balances:
        style = "red" if balance < 0 else "green"
        amount_display = f"[{style}]{format_money(balance, currency)}[/{style}]"
        table.add_row(escape(account.name), amount_display, account.account_type.value)

    return table


def accounts_command(ledger: Ledger) -> None:
    """List all accounts with their type."""
    try:
        accounts = ledger.list_accounts()
    except LedgerError as e:
        console.print(f"[red]Ledger error: {e}[/red]", style="bold")
        sys.exit(1)

    if not accounts:
        console.print("[yellow]No accounts found[/yellow]")
        return

    table = Table(title="Accounts")
    table.add_column("Account", style="cyan")
    table.add_column("Type", style="magenta")
    for account in accounts:
        table.add_row(escape(account.name), account.account_type.value)

    console.print(table)


def balances_command(ledger: Ledger, config: Config) -> None:
    """List the balance of every account."""
    try:
        balances = ledger.list_balances()
    except LedgerError as e:
        console.print(f"[red]Ledger error: {e}[/red]", style="bold")
        sys.exit(1)

    if not balances:
        console.print("[yellow]No accounts found[/yellow]")
        return

    console.print(_balance_table("Balances", balances, config.currency))


def shame_command(ledger: Ledger, config: Config) -> None:
    """List user accounts with a negative balance."""
    try:
        balances = ledger.list_balances()
    except LedgerError as e:
        console.print(f"[red]Ledger error: {e}[/red]", style="bold")
        sys.exit(1)

    negative = negative_user_balances(balances)
    if not negative:
        console.print("[green]Wall of shame: None at all! 🎉[/green]")
        return

    console.print(_balance_table("Wall of shame (negative user balances)", negative, config.currency))
