"""
GSTIN Service

Provides utility functions for GST registration numbers including:
- GSTIN format validation
- State code and PAN extraction
- Intra-state vs inter-state classification
"""
import re
from typing import Optional
from gstkit.core.config import settings
from gstkit.core.exceptions import InvalidArgument
from gstkit.core.state_codes import get_state_name
from gstkit.core.logging_config import get_logger
from gstkit.schemas.gst import GstinInfo

logger = get_logger("gstin_service")

# 2 digit state, 5 letter + 4 digit + 1 letter PAN, entity code, literal Z, checksum
GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][0-9A-Z]Z[0-9A-Z]$")
STATE_CODE_PATTERN = re.compile(r"^[0-9]{2}$")


def validate_gstin(value: str) -> bool:
    """
    Check that a GSTIN is well formed.

    Format: 22AAAAA0000A1Z5
    - 1-2: state code (digits)
    - 3-12: PAN (AAAAA0000A)
    - 13: entity code (digit or letter)
    - 14: literal 'Z'
    - 15: checksum character (alphanumeric, not verified)

    Never raises; anything that is not a 15-character string is invalid.
    """
    if not isinstance(value, str) or len(value) != 15:
        return False
    return GSTIN_PATTERN.match(value) is not None


def get_state_code_from_gstin(gstin: Optional[str]) -> Optional[str]:
    """Return the first two characters of a GSTIN, or None if it is too short."""
    if not gstin or len(gstin) < 2:
        return None
    return gstin[:2]


def get_pan_from_gstin(gstin: Optional[str]) -> Optional[str]:
    """Return the 10-character PAN embedded in a GSTIN, or None if it is too short."""
    if not gstin or len(gstin) < 12:
        return None
    return gstin[2:12]


def _jurisdiction(state: Optional[str], field: str) -> Optional[str]:
    # Accepts a bare state code or a full GSTIN; blank means missing
    if state is None:
        return None
    value = state.strip().upper()
    if not value:
        return None
    if len(value) > 2:
        value = get_state_code_from_gstin(value)
    if not STATE_CODE_PATTERN.match(value):
        logger.warning(f"Malformed {field}: {state!r}")
        raise InvalidArgument(f"{field} must be a 2-digit state code or a GSTIN, got {state!r}")
    return value


def is_interstate(
    supplier_state: Optional[str],
    customer_state: Optional[str],
    default: Optional[bool] = None,
) -> bool:
    """
    Decide whether a supply is inter-state (IGST) or intra-state (CGST + SGST).

    Args:
        supplier_state: Supplier state code or GSTIN
        customer_state: Customer state code or GSTIN
        default: Result when either state is missing. Falls back to
            settings.INTERSTATE_WHEN_STATE_UNKNOWN (False unless configured).

    Returns:
        True if both states are known and differ

    Raises:
        InvalidArgument: If a state is neither blank, a 2-digit code, nor a GSTIN starting with one
    """
    supplier = _jurisdiction(supplier_state, "supplier_state")
    customer = _jurisdiction(customer_state, "customer_state")

    if supplier is None or customer is None:
        fallback = settings.INTERSTATE_WHEN_STATE_UNKNOWN if default is None else default
        logger.warning(
            f"State missing for GST classification, using interstate={fallback}",
            extra={
                "supplier_state": supplier_state,
                "customer_state": customer_state,
            }
        )
        return fallback

    if get_state_name(supplier) is None or get_state_name(customer) is None:
        logger.info(f"Unknown state code in classification: {supplier} / {customer}")

    return supplier != customer


def describe_gstin(gstin: str) -> GstinInfo:
    """Validate a GSTIN and return its state and PAN parts."""
    state_code = get_state_code_from_gstin(gstin)
    return GstinInfo(
        gstin=gstin,
        is_valid=validate_gstin(gstin),
        state_code=state_code,
        state_name=get_state_name(state_code),
        pan=get_pan_from_gstin(gstin),
    )
