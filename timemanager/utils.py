from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional

# Largest amount a form may enter; keeps cent rounding within decimal precision
MAX_AMOUNT = Decimal("1e15")


def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to a file shipped inside the package.

    Args:
        relative_path: Relative path from the package root (e.g., "resources/templates")

    Returns:
        Absolute Path object
    """
    base_path = Path(__file__).parent.absolute()
    return base_path / relative_path


def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Read a form value as a finite decimal.

    Accepts numbers and numeric strings (a comma decimal separator is allowed).
    Returns None for anything else, including booleans, NaN, infinity and
    magnitudes of MAX_AMOUNT or more.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    else:
        text = str(value).strip().replace(",", ".")
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    if not number.is_finite() or abs(number) >= MAX_AMOUNT:
        return None
    return number
