"""Pure validators for usernames entered at the interactive prompt.

Validators are closures over a snapshot of known usernames. They never raise:
invalid input always produces a ValidationOutcome carrying a reason that is
shown to the operator before the prompt is repeated.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationOutcome:
    """Immutable result of validating one input."""

    valid: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls(True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationOutcome":
        return cls(False, reason)


Validator = Callable[[str], ValidationOutcome]


def existing_username_validator(usernames: Sequence[str]) -> Validator:
    """Build a validator accepting only known usernames.

    Args:
        usernames: Snapshot of known usernames.

    Returns:
        Validator that is valid iff the trimmed input exactly matches a known username.
    """

    def validate(value: str) -> ValidationOutcome:
        value = value.strip()
        if value in usernames:
            return ValidationOutcome.ok()
        return ValidationOutcome.invalid(f"Not a known username: {value}")

    return validate


def new_username_validator(usernames: Sequence[str]) -> Validator:
    """Build a validator for usernames that are about to be created.

    Checks run in a fixed order and stop at the first failure, so the same
    input always yields the same message.

    Args:
        usernames: Snapshot of known usernames.

    Returns:
        Validator for new usernames.
    """

    def validate(value: str) -> ValidationOutcome:
        value = value.strip()
        if not value:
            return ValidationOutcome.invalid("Username may not be empty")
        if " " in value:
            return ValidationOutcome.invalid("Username may not contain a space")
        if ":" in value:
            return ValidationOutcome.invalid("Username may not contain a colon")
        if value in usernames:
            return ValidationOutcome.invalid(f"Username already exists: {value}")
        return ValidationOutcome.ok()

    return validate
