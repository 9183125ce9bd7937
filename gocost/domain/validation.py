"""Pure input validation for values typed by the user.

Each function returns a (value, error) tuple; error is None on success.
"""

import math


def _parse_float(value: str) -> float | None:
    try:
        amount = float(value)
    except ValueError:
        return None
    # nan and inf cannot be written to the JSON document
    if not math.isfinite(amount):
        return None
    return amount


def validate_amount(text: str) -> tuple[float | None, str | None]:
    """Parse a required, non-zero amount.

    Args:
        text: Raw user input.

    Returns:
        Tuple of (amount, error).
    """
    value = text.strip()
    if not value:
        return None, "amount cannot be empty"

    amount = _parse_float(value)
    if amount is None:
        return None, f"invalid amount: {value}"

    if amount == 0:
        return None, "amount cannot be zero"

    return amount, None


def validate_optional_amount(text: str) -> tuple[float | None, str | None]:
    """Parse an amount where empty input means zero."""
    value = text.strip()
    if not value:
        return 0.0, None

    amount = _parse_float(value)
    if amount is None:
        return None, f"invalid amount: {value}"
    return amount, None


def validate_name(text: str, field: str = "name") -> tuple[str | None, str | None]:
    """Trim a free-text name and reject it if empty."""
    value = text.strip()
    if not value:
        return None, f"{field} cannot be empty"
    return value, None
