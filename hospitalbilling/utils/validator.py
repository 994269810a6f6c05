"""
Input validation for values typed at the billing prompts.
"""

import re

from .logger import get_logger

# ASCII digits with an optional sign; only ASCII whitespace around them
INTEGER_PATTERN = re.compile(r'^[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*$')

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class InputValidator:
    """Parse raw prompt input into typed values."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def parse_int(self, raw: str, field_name: str) -> int:
        """
        Parse a 32-bit integer field.

        Surrounding whitespace and a leading sign are accepted. Digit
        separators, non-ASCII digits and out-of-range values are not.

        Args:
            raw: Text as read from input
            field_name: Field name used in the error message

        Returns:
            Parsed integer

        Raises:
            ValueError: If the text is not a 32-bit integer
        """
        try:
            if not INTEGER_PATTERN.match(raw):
                raise ValueError(f"invalid literal for int: {raw!r}")
            value = int(raw)
            if not INT32_MIN <= value <= INT32_MAX:
                raise OverflowError(f"{value} is outside the 32-bit integer range")
        except (ValueError, OverflowError) as e:
            error_msg = f"Invalid {field_name}: {raw!r} is not an integer"
            self.logger.error(error_msg)
            raise ValueError(error_msg) from e
        return value

    def parse_patient_id(self, raw: str) -> int:
        return self.parse_int(raw, 'patient ID')

    def parse_category_choice(self, raw: str) -> int:
        return self.parse_int(raw, 'patient type choice')
