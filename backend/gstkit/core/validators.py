"""
Reusable validators for numeric inputs
"""
from decimal import Decimal, InvalidOperation
from typing import Any
from gstkit.core.exceptions import InvalidArgument
from gstkit.core.logging_config import get_logger

logger = get_logger("validators")


def to_decimal(value: Any, field: str = "value") -> Decimal:
    """
    Convert an int, float, str or Decimal to a finite Decimal.

    Floats go through ``str()`` so 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Args:
        value: Number to convert
        field: Name used in the error message

    Returns:
        Decimal value

    Raises:
        InvalidArgument: If value is missing, boolean, non-numeric, NaN or infinite
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgument(f"{field} must be a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            logger.warning(f"Rejected non-numeric {field}: {value!r}")
            raise InvalidArgument(f"{field} must be a number, got {value!r}")

    if not result.is_finite():
        raise InvalidArgument(f"{field} must be finite, got {value!r}")
    return result


def require_non_negative(value: Any, field: str = "value") -> Decimal:
    """
    Convert value with :func:`to_decimal` and reject negatives.

    Raises:
        InvalidArgument: If value is not a number or is below zero
    """
    result = to_decimal(value, field)
    if result < 0:
        logger.warning(
            f"Rejected negative {field}: {result}",
            extra={"field": field, "value": str(result)}
        )
        raise InvalidArgument(f"{field} must not be negative, got {result}")
    return result
