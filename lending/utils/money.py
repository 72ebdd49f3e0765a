"""Money conversion and formatting helpers."""
from decimal import Decimal, InvalidOperation
from typing import Optional

from .constants import CENTS


def to_money(value) -> Decimal:
    """
    Convert int/float/str/Decimal to Decimal.
    Floats go through str() so 0.85 stays 0.85 instead of its binary expansion.
    Raises ValueError on anything that is not a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a money amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a money amount: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a money amount: {value!r}")
    return result


def to_money_safe(value) -> Optional[Decimal]:
    """Safely convert to Decimal; return None if invalid."""
    try:
        return to_money(value)
    except (TypeError, ValueError):
        return None


def round2(x) -> Decimal:
    return to_money(x).quantize(CENTS)


def fmt_amount(value) -> str:
    """
    Plain display of an amount: trailing zeros trimmed but at least one decimal,
    e.g. 50 -> '50.0', 4.00 -> '4.0', 5.10 -> '5.1'.
    """
    d = to_money(value).normalize()
    if d == d.to_integral_value():
        return f"{d.quantize(Decimal('0.0'))}"
    return f"{d:f}"


def fmt_money(value) -> str:
    """Fixed two-decimal display used in summaries, e.g. 4 -> '4.00'."""
    return f"{round2(value):.2f}"


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"
