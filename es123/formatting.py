"""Number rendering that matches default stream output (``%g``)."""

DEFAULT_PRECISION = 6


def format_number(value, precision: int = DEFAULT_PRECISION) -> str:
    """Render ``value`` with ``precision`` significant digits, trailing zeros dropped.

    >>> format_number(2.0)
    '2'
    >>> format_number(0.1 + 0.2)
    '0.3'
    """
    return f"{value:.{precision}g}"
