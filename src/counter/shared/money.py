"""Fixed-point money helpers.

Prices are kept as ``Decimal`` quantized to cents and stored as their
canonical text ("4.50"). Floats never take part in arithmetic.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    """Convert a catalog price (int, float, str or Decimal) to a cent-quantized Decimal.

    Floats go through ``str`` first so 4.5 becomes ``Decimal("4.50")`` rather
    than the binary expansion of the float. Raises ``ValueError`` for values
    that are not finite numbers.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a price: {value!r}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"Not a price: {value!r}") from exc

    if not amount.is_finite():
        raise ValueError(f"Not a price: {value!r}")

    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    """Canonical storage text for a money amount."""
    return str(to_money(amount))
