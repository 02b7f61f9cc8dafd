# app/display/currency.py

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import List, Optional

from config import get_settings


def _group_indian(digits: str) -> str:
    """
    Kelompokkan digit bilangan bulat ala India:
    tiga digit terakhir, lalu per dua digit (12,34,567).
    """
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


def format_indian_number(value: float, max_fraction_digits: int = 0) -> str:
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    exact = Decimal(str(value))
    with localcontext() as ctx:
        # Presisi cukup untuk semua digit bulat + digit desimal (nilai sangat besar)
        ctx.prec = max(ctx.prec, exact.adjusted() + max_fraction_digits + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        integer_part, _, fraction_part = f"{abs(rounded):f}".partition(".")
    fraction_part = fraction_part.rstrip("0")

    text = sign + _group_indian(integer_part)
    if fraction_part:
        text += "." + fraction_part
    return text


def format_inr(value: float, max_fraction_digits: int = 0, symbol: Optional[str] = None) -> str:
    if symbol is None:
        symbol = get_settings().CURRENCY_SYMBOL
    return f"{symbol}{format_indian_number(value, max_fraction_digits)}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}"


def member_label(name: str, index: int) -> str:
    return name or f"Member {index + 1}"
