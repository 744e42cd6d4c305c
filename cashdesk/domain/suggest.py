"""Substring autocompletion over a fixed vocabulary."""

from collections.abc import Callable, Sequence

from cashdesk.domain.input import CliCommand

Suggester = Callable[[str], list[str]]


def filter_suggestions(candidates: Sequence[str], partial: str) -> list[str]:
    """Return candidates containing the partial input, ignoring case.

    Args:
        candidates: Vocabulary to filter, in display order.
        partial: What the operator has typed so far.

    Returns:
        Matching candidates in their original order and case. An empty
        partial input matches every candidate.
    """
    needle = partial.lower()
    return [candidate for candidate in candidates if needle in candidate.lower()]


def command_suggester(commands: Sequence[CliCommand]) -> Suggester:
    """Build a suggester over the canonical command names."""
    names = tuple(command.value for command in commands)
    return lambda partial: filter_suggestions(names, partial)


def username_suggester(usernames: Sequence[str]) -> Suggester:
    """Build a suggester over a snapshot of known usernames."""
    return lambda partial: filter_suggestions(usernames, partial)
