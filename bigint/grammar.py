from typing import Tuple

from pyparsing import Opt, ParseException, Word, nums, one_of


class BigIntegerError(Exception):
    """Base class for big integer errors."""
    pass


class FormatError(BigIntegerError, ValueError):
    """Raised when text is not a decimal integer."""
    def __init__(self, text: str, context: str = ""):
        self.text = text
        self.context = context
        super().__init__(f"Could not create BigInteger from {text!r}: non-integer value"
                         + (f" ({context})" if context else ""))


SIGN = one_of("+ -")
DIGITS = Word(nums)
# Whitespace is skipped around the sign and the digits, as in "  - 42 ".
DECIMAL = Opt(SIGN, default="+")("sign") + DIGITS("digits")


def parse_decimal(text: str) -> Tuple[bool, str]:
    """
    Splits decimal text into its sign and digit string.

    Args:
        text: optional sign followed by digits, surrounding whitespace allowed

    Returns:
        (negative, digits) where digits may carry leading zeros

    Raises:
        FormatError: if anything else is present
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    try:
        parsed = DECIMAL.parse_string(text, parse_all=True)
    except ParseException as e:
        raise FormatError(text, str(e)) from e
    return parsed.get("sign") == "-", parsed["digits"]
