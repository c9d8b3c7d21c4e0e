"""Data entry validator classes."""

from textual import validation

from datecheck.model import validator


class FreeTextDateValidator(validation.Validator):
    """Validate a date typed into a single text field."""

    def validate(self, value: str) -> validation.ValidationResult:
        """Verify input is a real date in an accepted format."""
        result = validator.validate_free_text(value)
        if result.is_valid:
            return self.success()
        return self.failure(result.message)


class IntegerFieldValidator(validation.Validator):
    """Flag day, month or year fields that do not start with a number.

    Empty fields pass, since the user may not have reached them yet.
    """

    def validate(self, value: str) -> validation.ValidationResult:
        if value and validator.parse_integer(value) is None:
            return self.failure("Must be a whole number.")
        return self.success()
