"""Interactive session for recording payments and adding users."""

import sys
from dataclasses import dataclass
from enum import Enum

import structlog
from rich.console import Console
from rich.markup import escape

from cashdesk.commands.prompting import Prompter, prompt_input
from cashdesk.config import Config
from cashdesk.domain.input import COMMANDS, CliCommand, InvalidAmountError, classify_command, parse_amount
from cashdesk.domain.models import (
    Account,
    AccountType,
    InvalidAccountError,
    Ledger,
    LedgerError,
    Money,
    TransactionRequest,
)
from cashdesk.domain.suggest import command_suggester, username_suggester
from cashdesk.domain.validation import existing_username_validator, new_username_validator

console = Console()
logger = structlog.get_logger(__name__)

# Account that new users are created from with a zero-amount transaction
USER_CREATION_SOURCE = "cash"

HELP_TEXT = """\
Enter an amount (e.g. 2.50) and then the name of the user who pays it.

Commands:
  adduser  Create a new user account
  help     Show this help

Press Tab to complete names and commands, Ctrl-C or Ctrl-D to quit."""


class IterationOutcome(Enum):
    """How one pass through the entry flow ended."""

    SUBMITTED = "submitted"
    USER_ADDED = "user_added"
    HELP = "help"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_ACCOUNT = "invalid_account"


def snapshot_usernames(ledger: Ledger) -> tuple[str, ...]:
    """Capture the names of all user accounts, in ledger order."""
    return tuple(account.name for account in ledger.list_accounts() if account.account_type == AccountType.USER)


@dataclass
class Session:
    """State owned by one interactive session.

    usernames is an immutable snapshot; validators and suggesters built from
    it never see later changes. It is only replaced as a whole.
    """

    ledger: Ledger
    config: Config
    usernames: tuple[str, ...] = ()

    def refresh_usernames(self) -> None:
        self.usernames = snapshot_usernames(self.ledger)
        logger.debug("usernames_refreshed", count=len(self.usernames))


def add_user(session: Session, ask: Prompter) -> IterationOutcome:
    """Prompt for a new username and create the account.

    Raises:
        LedgerError: If the ledger cannot store the transaction.
    """
    console.print("Adding user")
    new_name = ask("Name:", validator=new_username_validator(session.usernames))

    try:
        request = TransactionRequest(
            source=Account.source(USER_CREATION_SOURCE),
            destination=Account.user(new_name),
            amount=Money(0),
            description=f"Create user {new_name}",
        )
    except InvalidAccountError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return IterationOutcome.INVALID_ACCOUNT

    session.ledger.create_transaction(request)
    logger.debug("user_added", name=new_name)
    console.print(f"[green]Successfully added user {escape(new_name)}[/green]")

    session.refresh_usernames()
    return IterationOutcome.USER_ADDED


def record_payment(session: Session, text: str, ask: Prompter) -> IterationOutcome:
    """Parse an amount, ask who pays it and submit the payment.

    Args:
        session: Active session.
        text: Trimmed first input, already known not to be a command.
        ask: Prompt function.

    Returns:
        SUBMITTED, or INVALID_AMOUNT / INVALID_ACCOUNT when the iteration was abandoned.

    Raises:
        LedgerError: If the ledger cannot store the transaction.
    """
    try:
        amount = parse_amount(text)
    except InvalidAmountError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return IterationOutcome.INVALID_AMOUNT

    name = ask(
        "Name:",
        validator=existing_username_validator(session.usernames),
        suggester=username_suggester(session.usernames),
    )

    try:
        source = Account.user(name)
    except InvalidAccountError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return IterationOutcome.INVALID_ACCOUNT

    request = TransactionRequest(
        source=source,
        destination=session.config.account,
        amount=session.ledger.convert_amount(amount),
    )
    console.print(f"Creating transaction: {escape(name)} pays {amount:.2f} {session.config.currency}")
    session.ledger.create_transaction(request)
    logger.debug("payment_submitted", name=name, amount=request.amount, destination=str(request.destination))
    return IterationOutcome.SUBMITTED


def run_command(session: Session, command: CliCommand, ask: Prompter) -> IterationOutcome:
    """Run the branch for a recognised command."""
    if command is CliCommand.ADD_USER:
        return add_user(session, ask)
    console.print(HELP_TEXT)
    return IterationOutcome.HELP


def run_iteration(session: Session, ask: Prompter) -> IterationOutcome:
    """Run one pass of the entry flow, from the first prompt to submission.

    The first input is trimmed, then matched against the commands; anything
    that is not a command is treated as an amount.
    """
    text = ask(
        "Amount or command:",
        suggester=command_suggester(COMMANDS),
        placeholder=f"e.g. 2.50 {session.config.currency}",
    ).strip()

    command = classify_command(text)
    if command is not None:
        return run_command(session, command, ask)
    return record_payment(session, text, ask)


def run_session(session: Session, ask: Prompter = prompt_input) -> None:
    """Repeat the entry flow until interrupted.

    There is no normal exit. The loop ends only when the prompt layer aborts
    (closed input, Ctrl-C) or the ledger fails; both propagate to the caller.
    """
    session.refresh_usernames()
    while True:
        outcome = run_iteration(session, ask)
        logger.debug("iteration_finished", outcome=outcome.value)


def interactive_command(ledger: Ledger, config: Config, ask: Prompter = prompt_input) -> None:
    """Start an interactive session against a ledger."""
    console.print(f"Welcome to the cashdesk CLI for {config.name}!")

    try:
        run_session(Session(ledger=ledger, config=config), ask)
    except LedgerError as e:
        console.print(f"[red]Ledger error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
