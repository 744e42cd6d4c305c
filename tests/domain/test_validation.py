"""Tests for cashdesk.domain.validation pure functions."""

from cashdesk.domain.validation import ValidationOutcome, existing_username_validator, new_username_validator

KNOWN = ("alice", "bob")


class TestNewUsernameValidator:
    """Tests for new_username_validator."""

    def test_accepts_clean_new_name(self) -> None:
        """Should accept a new name without forbidden characters."""
        validate = new_username_validator(("bob",))
        assert validate("alice") == ValidationOutcome.ok()

    def test_rejects_empty(self) -> None:
        """Should reject empty and whitespace-only input."""
        validate = new_username_validator(KNOWN)
        assert validate("") == ValidationOutcome.invalid("Username may not be empty")
        assert validate("   ") == ValidationOutcome.invalid("Username may not be empty")

    def test_rejects_space(self) -> None:
        """Should reject names with an inner space."""
        validate = new_username_validator(KNOWN)
        assert validate("al ice") == ValidationOutcome.invalid("Username may not contain a space")

    def test_rejects_colon(self) -> None:
        """Should reject names with a colon."""
        validate = new_username_validator(KNOWN)
        assert validate("ali:ce") == ValidationOutcome.invalid("Username may not contain a colon")

    def test_rejects_existing(self) -> None:
        """Should reject names that already exist."""
        validate = new_username_validator(KNOWN)
        assert validate("alice") == ValidationOutcome.invalid("Username already exists: alice")

    def test_trims_before_checking(self) -> None:
        """Should ignore surrounding whitespace."""
        validate = new_username_validator(KNOWN)
        assert validate("  carol  ").valid
        assert validate(" alice ").reason == "Username already exists: alice"

    def test_space_checked_before_colon(self) -> None:
        """Should report the first failing check only."""
        validate = new_username_validator(KNOWN)
        assert validate("a b:c").reason == "Username may not contain a space"

    def test_colon_checked_before_existence(self) -> None:
        """Should report the colon even if the name is also known."""
        validate = new_username_validator(("a:b",))
        assert validate("a:b").reason == "Username may not contain a colon"

    def test_existence_is_case_sensitive(self) -> None:
        """Should accept a differently cased variant of a known name."""
        validate = new_username_validator(KNOWN)
        assert validate("Alice").valid


class TestExistingUsernameValidator:
    """Tests for existing_username_validator."""

    def test_accepts_known(self) -> None:
        """Should accept a known username."""
        validate = existing_username_validator(KNOWN)
        assert validate("alice").valid
        assert validate("alice").reason is None

    def test_rejects_unknown(self) -> None:
        """Should name the rejected input."""
        validate = existing_username_validator(KNOWN)
        assert validate("carol") == ValidationOutcome.invalid("Not a known username: carol")

    def test_case_sensitive(self) -> None:
        """Should reject a differently cased name."""
        validate = existing_username_validator(("alice",))
        assert not validate("Alice").valid

    def test_trims_input(self) -> None:
        """Should match after trimming surrounding whitespace."""
        validate = existing_username_validator(KNOWN)
        assert validate(" bob ").valid

    def test_rejects_empty(self) -> None:
        """Should reject empty input."""
        validate = existing_username_validator(KNOWN)
        assert not validate("").valid

    def test_empty_snapshot_rejects_everything(self) -> None:
        """Should reject every name when no users exist."""
        validate = existing_username_validator(())
        assert not validate("alice").valid
