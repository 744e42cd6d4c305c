"""Prompt layer for the interactive session.

Wraps typer prompts with inline validation and readline tab completion.
"""

import readline
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Protocol

import typer

from cashdesk.domain.suggest import Suggester
from cashdesk.domain.validation import Validator


class Prompter(Protocol):
    """Callable that asks the operator for one line of input."""

    def __call__(
        self,
        message: str,
        *,
        validator: Validator | None = None,
        suggester: Suggester | None = None,
        placeholder: str | None = None,
    ) -> str: ...


def make_completer(suggester: Suggester) -> Callable[[str, int], str | None]:
    """Adapt a suggester to readline's completer protocol.

    Readline calls the completer with increasing state until it returns None.
    """

    def complete(text: str, state: int) -> str | None:
        suggestions = suggester(text)
        if state < len(suggestions):
            return suggestions[state]
        return None

    return complete


@contextmanager
def completion(suggester: Suggester | None) -> Iterator[None]:
    """Enable tab completion from a suggester while the block runs."""
    if suggester is None:
        yield
        return

    previous = readline.get_completer()
    previous_delims = readline.get_completer_delims()
    readline.set_completer(make_completer(suggester))
    # Complete against the whole line, names and commands have no spaces
    readline.set_completer_delims("")
    readline.parse_and_bind("tab: complete")
    try:
        yield
    finally:
        readline.set_completer(previous)
        readline.set_completer_delims(previous_delims)


def make_value_proc(validator: Validator) -> Callable[[str], str]:
    """Turn a validator into a typer value_proc.

    Raising BadParameter makes typer print the reason and ask again.
    """

    def value_proc(value: str) -> str:
        outcome = validator(value)
        if not outcome.valid:
            raise typer.BadParameter(outcome.reason or "Invalid value")
        return value.strip()

    return value_proc


def prompt_input(
    message: str,
    *,
    validator: Validator | None = None,
    suggester: Suggester | None = None,
    placeholder: str | None = None,
) -> str:
    """Ask for one line of input.

    Args:
        message: Prompt text.
        validator: Optional validator; invalid input is reported and asked again.
        suggester: Optional suggestion provider for tab completion.
        placeholder: Optional example input shown after the prompt text.

    Returns:
        The entered text, stripped of surrounding whitespace.

    Raises:
        click.exceptions.Abort: If input is closed or interrupted.
    """
    text = message.rstrip(":")
    if placeholder:
        text = f"{text} ({placeholder})"

    with completion(suggester):
        if validator is None:
            result: str = typer.prompt(text, type=str)
            return result.strip()
        # An empty default lets the validator report empty input
        validated: str = typer.prompt(
            text, type=str, default="", show_default=False, value_proc=make_value_proc(validator)
        )
        return validated
