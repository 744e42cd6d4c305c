"""Tests for the prompt layer."""

import readline

import pytest
import typer

from cashdesk.commands.prompting import completion, make_completer, make_value_proc
from cashdesk.domain.suggest import username_suggester
from cashdesk.domain.validation import existing_username_validator, new_username_validator


class TestMakeCompleter:
    """Tests for make_completer."""

    def test_walks_suggestions_then_stops(self) -> None:
        """Should return each suggestion by state, then None."""
        complete = make_completer(username_suggester(("Alice", "Bob", "Nicole")))
        assert complete("ic", 0) == "Alice"
        assert complete("ic", 1) == "Nicole"
        assert complete("ic", 2) is None

    def test_no_suggestions(self) -> None:
        """Should return None immediately when nothing matches."""
        complete = make_completer(username_suggester(("Alice",)))
        assert complete("zz", 0) is None


class TestCompletion:
    """Tests for the completion context manager."""

    def test_restores_previous_completer(self) -> None:
        """Should put back the completer and delimiters that were active before."""

        def previous(text: str, state: int) -> str | None:
            return None

        readline.set_completer(previous)
        delims = readline.get_completer_delims()

        with completion(username_suggester(("alice",))):
            assert readline.get_completer() is not previous
            assert readline.get_completer_delims() == ""

        assert readline.get_completer() is previous
        assert readline.get_completer_delims() == delims
        readline.set_completer(None)

    def test_no_suggester_leaves_readline_alone(self) -> None:
        """Should not touch readline without a suggester."""
        readline.set_completer(None)
        with completion(None):
            assert readline.get_completer() is None


class TestMakeValueProc:
    """Tests for make_value_proc."""

    def test_returns_trimmed_valid_value(self) -> None:
        """Should pass valid input through, stripped."""
        value_proc = make_value_proc(existing_username_validator(("alice",)))
        assert value_proc(" alice ") == "alice"

    def test_raises_with_reason(self) -> None:
        """Should raise BadParameter carrying the validator's reason."""
        value_proc = make_value_proc(new_username_validator(("alice",)))
        with pytest.raises(typer.BadParameter) as excinfo:
            value_proc("al ice")
        assert excinfo.value.message == "Username may not contain a space"
