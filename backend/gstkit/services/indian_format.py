"""
Indian number formatting and amount-in-words helpers.

Grouping follows the Indian convention: the last three integer digits form
one group and every group before that has two digits, so lakh and crore
boundaries fall out of the rule without special cases.

>>> format_indian_number(1234567, 0)
'12,34,567'
>>> format_indian_currency(1234567.5)
'₹12,34,567.50'
>>> convert_currency_to_words(150000)
'One Lakh Fifty Thousand Rupees'
"""
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, List, Optional
from gstkit.core.exceptions import InvalidArgument
from gstkit.core.validators import require_non_negative, to_decimal

RUPEE_SYMBOL = "₹"

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: List[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_indian_number(value: Any, decimals: int = 2) -> str:
    """
    Format a number with Indian digit grouping and a fixed number of decimals.

    The fraction is rounded ROUND_HALF_UP.

    Raises:
        InvalidArgument: If value is not a number or decimals is negative
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise InvalidArgument(f"decimals must be a non-negative integer, got {decimals!r}")

    number = to_decimal(value, "value")
    try:
        rounded = number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidArgument(f"value is too large to format: {value!r}")

    sign = "-" if rounded < 0 else ""
    text = format(abs(rounded), "f")
    integer_part, _, fraction = text.partition(".")

    result = sign + _group_indian(integer_part)
    if decimals > 0:
        result += "." + fraction
    return result


def format_indian_currency(value: Any) -> str:
    """Format as rupees with two decimals, e.g. ``₹12,34,567.89`` or ``-₹1,234.00``."""
    formatted = format_indian_number(value, 2)
    if formatted.startswith("-"):
        return f"-{RUPEE_SYMBOL}{formatted[1:]}"
    return f"{RUPEE_SYMBOL}{formatted}"


def parse_indian_currency(text: Any) -> Decimal:
    """
    Parse a string produced by :func:`format_indian_currency` or
    :func:`format_indian_number` back to a Decimal.

    Raises:
        InvalidArgument: If nothing numeric remains after removing the symbol and commas
    """
    if not isinstance(text, str):
        return to_decimal(text, "amount")
    cleaned = text.strip()
    for token in (RUPEE_SYMBOL, "INR", "Rs.", ",", " "):
        cleaned = cleaned.replace(token, "")
    if not cleaned:
        raise InvalidArgument(f"amount must be a number, got {text!r}")
    return to_decimal(cleaned, "amount")


def _two_digit_words(number: int) -> str:
    if number < 20:
        return ONES[number]
    tens, unit = divmod(number, 10)
    return TENS[tens] + (f" {ONES[unit]}" if unit else "")


def convert_to_words(number: int) -> str:
    """
    Convert an integer to words using Indian scale names.

    Example: 123456 -> "One Lakh Twenty Three Thousand Four Hundred Fifty Six"
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidArgument(f"number must be an integer, got {number!r}")
    if number == 0:
        return "Zero"
    if number < 0:
        return "Minus " + convert_to_words(-number)

    parts: List[str] = []
    crore, number = divmod(number, CRORE)
    if crore:
        parts.append(f"{convert_to_words(crore)} Crore")
    lakh, number = divmod(number, LAKH)
    if lakh:
        parts.append(f"{_two_digit_words(lakh)} Lakh")
    thousand, number = divmod(number, THOUSAND)
    if thousand:
        parts.append(f"{_two_digit_words(thousand)} Thousand")
    hundred, number = divmod(number, 100)
    if hundred:
        parts.append(f"{ONES[hundred]} Hundred")
    if number:
        parts.append(_two_digit_words(number))
    return " ".join(parts)


def convert_currency_to_words(amount: Any) -> str:
    """
    Convert a rupee amount to words for the "amount in words" line of an invoice.

    Example: 1234.56 -> "One Thousand Two Hundred Thirty Four Rupees and Fifty Six Paise"

    Singular forms are used for exactly one: "One Rupee", "One Paisa".

    Raises:
        InvalidArgument: If amount is negative, not a number or too large
    """
    value = require_non_negative(amount, "amount")
    try:
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidArgument(f"amount is too large to convert: {amount!r}")
    if value == 0:
        return "Zero Rupees"

    rupees = int(value)
    paise = int((value - rupees) * 100)

    words = f"{convert_to_words(rupees)} {'Rupee' if rupees == 1 else 'Rupees'}"
    if paise > 0:
        words += f" and {convert_to_words(paise)} {'Paisa' if paise == 1 else 'Paise'}"
    return words


def get_financial_year(on_date: Optional[date] = None) -> str:
    """
    Indian financial year label (April 1 to March 31), e.g. "2024-25".
    """
    on_date = on_date or date.today()
    start = on_date.year if on_date.month >= 4 else on_date.year - 1
    return f"{start}-{(start + 1) % 100:02d}"
