"""Classification of the first line typed in an interactive iteration.

The first prompt accepts either a command or an amount. Commands are always
tried first with an exact, case-insensitive match; anything else is parsed as
an amount.
"""

import math
from enum import Enum

# Amounts are stored in cents as signed 64-bit integers
MAX_CENTS = 2**63


class InvalidAmountError(ValueError):
    """Raised when input is neither a command nor a usable amount."""


class CliCommand(str, Enum):
    """Commands available at the first prompt, keyed by canonical name."""

    ADD_USER = "adduser"
    HELP = "help"


COMMANDS: tuple[CliCommand, ...] = (CliCommand.ADD_USER, CliCommand.HELP)


def classify_command(text: str) -> CliCommand | None:
    """Match input against the command vocabulary.

    The match is exact apart from case. Input is not trimmed here; callers
    strip the raw line first.

    Args:
        text: Input typed at the first prompt.

    Returns:
        Matching command, or None if the input should be treated as an amount.
    """
    lowered = text.lower()
    for command in COMMANDS:
        if command.value == lowered:
            return command
    return None


def parse_amount(text: str) -> float:
    """Parse a decimal amount in major currency units.

    Args:
        text: Amount as typed, e.g. "2.50".

    Returns:
        Parsed amount.

    Raises:
        InvalidAmountError: If the text is not a finite number, or is too large
            to store in cents.
    """
    try:
        amount = float(text)
    except ValueError:
        raise InvalidAmountError(f"Invalid amount: {text}") from None
    if not math.isfinite(amount) or abs(amount) * 100 >= MAX_CENTS:
        raise InvalidAmountError(f"Invalid amount: {text}")
    return amount
