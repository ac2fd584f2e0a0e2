"""Display formatting helpers for Brazilian number conventions."""
import math

# Shown in place of NaN or infinity so an overflow never reads as zero.
NOT_A_NUMBER = "—"


def _br_grouping(value: float, digits: int) -> str:
    """Render ``value`` with dot thousands separators and a decimal comma."""
    formatted = f"{abs(value):,.{digits}f}"
    return formatted.replace(",", "_").replace(".", ",").replace("_", ".")


def _as_float(x) -> float:
    try:
        return float(x)
    except (TypeError, ValueError):
        return 0.0


def format_currency(value) -> str:
    """Format a value as Brazilian real, e.g. ``R$ 1.234,56``.

    Negative values carry the minus sign before the currency symbol.
    """
    v = _as_float(value)
    if not math.isfinite(v):
        return NOT_A_NUMBER
    v = round(v, 2)
    sign = "-" if v < 0 else ""
    return f"{sign}R$ {_br_grouping(v, 2)}"


def format_percent(value) -> str:
    """Five fraction digits followed by ``%``: ``2.5`` -> ``2,50000%``."""
    v = _as_float(value)
    if not math.isfinite(v):
        return NOT_A_NUMBER
    v = round(v, 5)
    sign = "-" if v < 0 else ""
    return f"{sign}{_br_grouping(v, 5)}%"


def format_months(value) -> str:
    """Render the term as a plain number: ``60`` -> ``60``, ``60.5`` -> ``60,5``."""
    v = _as_float(value)
    if not math.isfinite(v):
        return NOT_A_NUMBER
    if v.is_integer():
        return str(int(v))
    return str(v).replace(".", ",")
