"""
GST Service

Provides the tax calculation functions:
- CGST/SGST/IGST/CESS amounts for a taxable amount and rate
- Rate resolution by HSN/SAC code or tax category

All arithmetic uses Decimal. Each tax component is rounded once to
2 places with ROUND_HALF_UP; total_tax is the sum of the rounded
components and total = taxable_amount + total_tax.
"""
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional
from gstkit.core.exceptions import InvalidArgument, LookupMiss
from gstkit.core.gst_rates import GSTRateRow, find_gst_rate, get_gst_rate_by_category
from gstkit.core.validators import require_non_negative
from gstkit.core.logging_config import get_logger
from gstkit.schemas.gst import GstCalculation, TaxRate
from gstkit.services.gstin_service import is_interstate

logger = get_logger("gst_service")

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0.00")


def round_money(value: Decimal) -> Decimal:
    """
    Round to 2 places HALF_UP.

    Raises:
        InvalidArgument: If the value has more digits than the Decimal context holds
    """
    try:
        return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.warning(f"Amount too large to round to paise: {value}")
        raise InvalidArgument(f"amount is too large to calculate: {value}")


def _percentage(amount: Decimal, rate: Decimal) -> Decimal:
    return round_money(amount * rate / HUNDRED)


def tax_rate_from_row(row: GSTRateRow) -> TaxRate:
    return TaxRate(
        cgst_rate=row.cgst_rate,
        sgst_rate=row.sgst_rate,
        igst_rate=row.igst_rate,
        cess_rate=row.cess_rate,
    )


def calculate_gst(taxable_amount: Any, rates: TaxRate, interstate: bool) -> GstCalculation:
    """
    Calculate GST for a taxable amount.

    Args:
        taxable_amount: Base amount before tax (int, float, str or Decimal)
        rates: CGST/SGST/IGST/CESS percentages
        interstate: If True, charge IGST instead of CGST + SGST

    Returns:
        GstCalculation with rounded component amounts and totals.
        - Intra-state: cgst and sgst set, igst = 0
        - Inter-state: igst set, cgst = sgst = 0
        - Cess applies in both cases

    Raises:
        InvalidArgument: If the amount or any rate is negative or not a number
    """
    amount = require_non_negative(taxable_amount, "taxable_amount")
    cgst_rate = require_non_negative(rates.cgst_rate, "cgst_rate")
    sgst_rate = require_non_negative(rates.sgst_rate, "sgst_rate")
    igst_rate = require_non_negative(rates.igst_rate, "igst_rate")
    cess_rate = require_non_negative(rates.cess_rate, "cess_rate")

    if interstate:
        cgst = ZERO
        sgst = ZERO
        igst = _percentage(amount, igst_rate)
    else:
        cgst = _percentage(amount, cgst_rate)
        sgst = _percentage(amount, sgst_rate)
        igst = ZERO

    cess = _percentage(amount, cess_rate)
    total_tax = cgst + sgst + igst + cess
    total = round_money(amount + total_tax)

    logger.debug(
        f"GST calculated - CGST: {cgst}, SGST: {sgst}, IGST: {igst}, CESS: {cess}, Total: {total}",
        extra={"taxable_amount": str(amount), "interstate": interstate}
    )

    return GstCalculation(
        taxable_amount=amount,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        cess=cess,
        total_tax=total_tax,
        total=total,
        cgst_rate=cgst_rate,
        sgst_rate=sgst_rate,
        igst_rate=igst_rate,
        cess_rate=cess_rate,
        is_interstate=bool(interstate),
    )


def resolve_gst_rate(hsn_or_sac_code: str, on_date: Optional[date] = None) -> GSTRateRow:
    """
    Look up the rate row for an HSN or SAC code.

    Raises:
        LookupMiss: If no active row matches the code on the given date
    """
    rate = find_gst_rate(hsn_or_sac_code, on_date)
    if rate is None:
        logger.warning(
            f"GST rate not found for code: {hsn_or_sac_code}",
            extra={"code": hsn_or_sac_code, "on_date": str(on_date) if on_date else None}
        )
        raise LookupMiss(f"GST rate not found for code: {hsn_or_sac_code}")
    return rate


def calculate_gst_for_code(
    hsn_or_sac_code: str,
    amount: Any,
    supplier_state: Optional[str],
    customer_state: Optional[str],
    on_date: Optional[date] = None,
) -> GstCalculation:
    """Resolve the rate for an HSN/SAC code, classify the supply, and calculate GST."""
    logger.debug(
        f"Calculating GST for code: {hsn_or_sac_code}, amount: {amount}, "
        f"supplier state: {supplier_state}, customer state: {customer_state}"
    )
    rate = resolve_gst_rate(hsn_or_sac_code, on_date)
    interstate = is_interstate(supplier_state, customer_state)
    return calculate_gst(amount, tax_rate_from_row(rate), interstate)


def calculate_gst_by_category(tax_category: str, amount: Any, interstate: bool) -> GstCalculation:
    """
    Calculate GST using a tax category such as GST_5 or GST_18.

    Raises:
        LookupMiss: If the category is unknown
    """
    rate = get_gst_rate_by_category(tax_category)
    if rate is None:
        logger.warning(f"GST rate not found for category: {tax_category}")
        raise LookupMiss(f"GST rate not found for category: {tax_category}")
    return calculate_gst(amount, tax_rate_from_row(rate), interstate)
