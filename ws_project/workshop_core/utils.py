"""
Small helpers shared by the receipt, company and salary services:
amount-to-words (Indian numbering: lakh/crore), Indian digit grouping
and payload sanitizing.
"""
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.core.exceptions import ValidationError

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight",
    "Nine", "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen",
    "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy",
    "Eighty", "Ninety",
]

CENT = Decimal("0.01")


def to_decimal(value, default=None):
    """Parse int/float/str into Decimal. Returns default when not numeric."""
    if value is None or value == "":
        return default
    if isinstance(value, Decimal):
        return value
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default
    if not number.is_finite():
        return default
    return number


def _below_hundred(n):
    if n < 20:
        return ONES[n]
    tens, ones = divmod(n, 10)
    return f"{TENS[tens]} {ONES[ones]}".strip()


def _integer_words(n):
    parts = []
    crore, n = divmod(n, 10_000_000)
    if crore:
        # beyond 99 crore keep nesting: "One Hundred Crore"
        parts.append(f"{_integer_words(crore)} Crore")
    lakh, n = divmod(n, 100_000)
    if lakh:
        parts.append(f"{_below_hundred(lakh)} Lakh")
    thousand, n = divmod(n, 1000)
    if thousand:
        parts.append(f"{_below_hundred(thousand)} Thousand")
    hundred, n = divmod(n, 100)
    if hundred:
        parts.append(f"{ONES[hundred]} Hundred")
    if n:
        parts.append(_below_hundred(n))
    return " ".join(parts)


def amount_in_words(amount):
    """
    Spell out a taka amount, e.g.
        amount_in_words(150000)  -> "One Lakh Fifty Thousand"
        amount_in_words("12.50") -> "Twelve and Fifty Paisa"
    Deterministic for a given numeric value.
    """
    number = to_decimal(amount, default=Decimal("0"))
    number = number.quantize(CENT, rounding=ROUND_HALF_UP)

    prefix = ""
    if number < 0:
        prefix = "Minus "
        number = -number

    whole = int(number)
    paisa = int((number - whole) * 100)

    words = _integer_words(whole) if whole else "Zero"
    if paisa:
        words = f"{words} and {_below_hundred(paisa)} Paisa"
    return prefix + words


def format_to_indian_currency(amount):
    """
    Group digits the Indian way: 1234567.5 -> "12,34,567.50".
    Fraction is only shown when it is non-zero.
    """
    number = to_decimal(amount, default=Decimal("0")).quantize(
        CENT, rounding=ROUND_HALF_UP
    )
    sign = "-" if number < 0 else ""
    number = abs(number)

    whole, fraction = f"{number:.2f}".split(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])

    if fraction == "00":
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction}"


def sanitize_payload(payload, allowed_fields=None):
    """
    Drop keys whose value is None or a blank string and trim strings,
    so partial updates never overwrite stored values with empties.
    When allowed_fields is given, unknown keys are dropped too.
    """
    if payload is not None and not isinstance(payload, Mapping):
        raise ValidationError("Payload must be an object")
    clean = {}
    for key, value in (payload or {}).items():
        if allowed_fields is not None and key not in allowed_fields:
            continue
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                continue
        if value is None:
            continue
        clean[key] = value
    return clean
