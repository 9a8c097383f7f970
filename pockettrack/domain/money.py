"""Pure functions for money arithmetic and formatting.

All amounts are Money (integer minor units). Conversions to and from decimal
amounts round half-up to 2 fractional digits.
"""

from decimal import ROUND_HALF_UP, Decimal

from pockettrack.domain.models import Money

CENTS = Decimal("0.01")


def to_money(amount: Decimal) -> Money:
    """Convert a decimal amount to minor units, rounding half-up.

    Args:
        amount: Decimal amount (e.g. Decimal("123.455")).

    Returns:
        Amount in minor units (e.g. 12346).
    """
    return Money(int(amount.quantize(CENTS, rounding=ROUND_HALF_UP) * 100))


def to_decimal(amount: Money) -> Decimal:
    """Convert minor units to a decimal amount with 2 fractional digits."""
    return (Decimal(amount) / 100).quantize(CENTS)


def divide_money(total: Money, divisor: int) -> Money:
    """Divide an amount, rounding the result half-up to whole minor units.

    Args:
        total: Amount in minor units.
        divisor: Positive divisor (days, entries).

    Returns:
        Rounded quotient, or 0 when divisor is not positive.
    """
    if divisor <= 0:
        return Money(0)
    quotient = Decimal(total) / Decimal(divisor)
    return Money(int(quotient.quantize(Decimal(1), rounding=ROUND_HALF_UP)))


def format_amount(amount: Money) -> str:
    """Format an amount with exactly 2 decimals and no grouping (e.g. "-12.50")."""
    return f"{to_decimal(amount):.2f}"


def format_money_display(amount: Money, symbol: str = "৳", include_sign: bool = False) -> str:
    """Format money amount for display.

    Args:
        amount: Amount in minor units.
        symbol: Currency symbol.
        include_sign: Whether to include + or - sign.

    Returns:
        Formatted string (e.g., "৳ 1,234.50" or "-৳ 1,234.50").
    """
    formatted = f"{symbol} {abs(to_decimal(amount)):,.2f}"

    if include_sign:
        return f"-{formatted}" if amount < 0 else f"+{formatted}"
    if amount < 0:
        return f"-{formatted}"
    return formatted
