"""Display formatting helpers."""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation


def format_currency(amount):
    """Format ``amount`` as whole US dollars, e.g. ``-$1,235``.

    Cents are rounded half-up. Amounts that round to zero print as ``$0``.
    """
    try:
        value = Decimal(str(amount))
        dollars = int(value.copy_abs().quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError, TypeError):
        return "$0"
    sign = "-" if value < 0 and dollars else ""
    return f"{sign}${dollars:,}"


def format_months(months):
    """Render a month count as ``"N months"``, ``"N years"`` or ``"Y years, M months"``."""
    try:
        m = int(months)
    except (TypeError, ValueError, OverflowError):
        return "0 months"
    if m <= 0:
        return "0 months"
    years, rest = divmod(m, 12)
    if years == 0:
        return f"{rest} months"
    if rest == 0:
        return f"{years} years"
    return f"{years} years, {rest} months"
