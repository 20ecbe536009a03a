"""Free-text price normalization."""

import re
import sys

_NON_DIGIT_OR_COMMA = re.compile(r"[^0-9,]")
_LEADING_DIGITS = re.compile(r"[0-9]+")


def clean_price_text(price_text: str | None) -> int | None:
    """
    Reduce a price string such as ``"1,234 TL"`` to an integer.

    Every character other than an ASCII digit or a comma is dropped, then the
    first comma is removed and the leading run of digits is parsed. Returns
    None for empty input, when nothing numeric is left, or when the digit
    run is too large to represent as a number.

    The heuristic is lossy: ``"12.500 TL"`` gives 12500 and ``"12,50 TL"``
    gives 1250, since there is no notion of a decimal separator.
    """
    if not price_text:
        return None

    cleaned = _NON_DIGIT_OR_COMMA.sub("", price_text).replace(",", "", 1)
    match = _LEADING_DIGITS.match(cleaned)
    if match is None:
        return None
    try:
        value = int(match.group())
    except ValueError:
        # Longer than the interpreter will convert (sys.get_int_max_str_digits)
        return None
    # Beyond the double range a JSON consumer cannot represent the number
    return value if value <= sys.float_info.max else None
