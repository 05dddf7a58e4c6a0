import math
from decimal import ROUND_HALF_UP, Decimal


def _is_number(amount) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return False
    return not (isinstance(amount, float) and (math.isnan(amount) or math.isinf(amount)))


def _group_thousands(value: int) -> str:
    return "{:,}".format(value).replace(",", ".")


def format_clp(amount) -> str:
    """Chilean peso, no decimals: 1200 -> "$1.200", -1200 -> "-$1.200"."""
    if not _is_number(amount):
        return "$0"
    rounded = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    return "{}${}".format(sign, _group_thousands(abs(rounded)))


def format_number(amount) -> str:
    """es-CL grouping with up to three decimals: 1234.5 -> "1.234,5"."""
    if not _is_number(amount):
        return "0"
    value = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole = int(value)
    fraction = str(value - whole)[2:].rstrip("0") if value != whole else ""
    text = _group_thousands(whole)
    if fraction:
        text += "," + fraction
    return sign + text
