"""
Hardcoded GST rates (reference data). IDs 1–5 are the plain tax-category rows;
later ids carry HSN (goods) or SAC (services) codes.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

GST_LAUNCH_DATE = date(2017, 7, 1)

# (id, name, tax_category, hsn_code, sac_code,
#  cgst_rate, sgst_rate, igst_rate, cess_rate, effective_from, effective_to, is_active)
_GST_RATES: List[tuple] = [
    (1, "GST 0%", "GST_0", None, None, Decimal("0"), Decimal("0"), Decimal("0"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (2, "GST 5%", "GST_5", None, None, Decimal("2.5"), Decimal("2.5"), Decimal("5"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (3, "GST 12%", "GST_12", None, None, Decimal("6"), Decimal("6"), Decimal("12"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (4, "GST 18%", "GST_18", None, None, Decimal("9"), Decimal("9"), Decimal("18"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (5, "GST 28%", "GST_28", None, None, Decimal("14"), Decimal("14"), Decimal("28"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    # Goods
    (6, "Fresh milk", "GST_0", "0401", None, Decimal("0"), Decimal("0"), Decimal("0"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (7, "Tea", "GST_5", "0902", None, Decimal("2.5"), Decimal("2.5"), Decimal("5"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (8, "Computers and peripherals", "GST_18", "8471", None, Decimal("9"), Decimal("9"), Decimal("18"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (9, "Mobile phones", "GST_12", "8517", None, Decimal("6"), Decimal("6"), Decimal("12"), Decimal("0"), GST_LAUNCH_DATE, date(2020, 3, 31), True),
    (10, "Mobile phones", "GST_18", "8517", None, Decimal("9"), Decimal("9"), Decimal("18"), Decimal("0"), date(2020, 4, 1), None, True),
    (11, "Aerated waters", "GST_28", "2202", None, Decimal("14"), Decimal("14"), Decimal("28"), Decimal("12"), GST_LAUNCH_DATE, None, True),
    (12, "Motor cars (withdrawn entry)", "GST_28", "8703", None, Decimal("14"), Decimal("14"), Decimal("28"), Decimal("15"), GST_LAUNCH_DATE, None, False),
    # Services
    (13, "Restaurant services", "GST_5", None, "996331", Decimal("2.5"), Decimal("2.5"), Decimal("5"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (14, "IT design and development services", "GST_18", None, "998314", Decimal("9"), Decimal("9"), Decimal("18"), Decimal("0"), GST_LAUNCH_DATE, None, True),
    (15, "Hairdressing and beauty services", "GST_18", None, "999721", Decimal("9"), Decimal("9"), Decimal("18"), Decimal("0"), GST_LAUNCH_DATE, None, True),
]


class GSTRateRow:
    """Simple value object for a GST rate row (used for API response serialization)."""
    __slots__ = (
        "id", "name", "tax_category", "hsn_code", "sac_code",
        "cgst_rate", "sgst_rate", "igst_rate", "cess_rate",
        "effective_from", "effective_to", "is_active",
    )

    def __init__(
        self,
        id: int,
        name: str,
        tax_category: str,
        hsn_code: Optional[str],
        sac_code: Optional[str],
        cgst_rate: Decimal,
        sgst_rate: Decimal,
        igst_rate: Decimal,
        cess_rate: Decimal,
        effective_from: date,
        effective_to: Optional[date],
        is_active: bool,
    ):
        self.id = id
        self.name = name
        self.tax_category = tax_category
        self.hsn_code = hsn_code
        self.sac_code = sac_code
        self.cgst_rate = cgst_rate
        self.sgst_rate = sgst_rate
        self.igst_rate = igst_rate
        self.cess_rate = cess_rate
        self.effective_from = effective_from
        self.effective_to = effective_to
        self.is_active = is_active

    @property
    def total_gst_rate(self) -> Decimal:
        """Combined GST rate (CGST + SGST = IGST), excluding cess."""
        return self.igst_rate

    def is_valid_for_date(self, on_date: date) -> bool:
        if not self.is_active:
            return False
        if on_date < self.effective_from:
            return False
        if self.effective_to is not None and on_date > self.effective_to:
            return False
        return True

    def __repr__(self) -> str:
        return f"GSTRateRow(id={self.id}, name={self.name!r}, tax_category={self.tax_category!r})"


def _row(r: tuple) -> GSTRateRow:
    return GSTRateRow(*r)


def get_gst_rates(active_only: bool = False) -> List[GSTRateRow]:
    """Return all GST rates, optionally only active ones."""
    return [_row(r) for r in _GST_RATES if r[11] or not active_only]


def get_gst_rate_by_id(gst_rate_id: int) -> Optional[GSTRateRow]:
    """Return the GST rate for the given id, or None if not found."""
    for r in _GST_RATES:
        if r[0] == gst_rate_id:
            return _row(r)
    return None


def get_valid_gst_rate_ids() -> List[int]:
    """Return list of valid GST rate ids (for validation)."""
    return [r[0] for r in _GST_RATES]


def get_gst_rate_by_category(tax_category: str, on_date: Optional[date] = None) -> Optional[GSTRateRow]:
    """Return the plain category row (no HSN/SAC code) for e.g. ``GST_18``."""
    if not tax_category:
        return None
    on_date = on_date or date.today()
    wanted = tax_category.strip().upper()
    for rate in get_gst_rates():
        if rate.hsn_code is None and rate.sac_code is None and rate.tax_category == wanted:
            if rate.is_valid_for_date(on_date):
                return rate
    return None


def normalize_code(code: Optional[str]) -> str:
    """Strip whitespace and dots, e.g. ``"8471.30 "`` -> ``"847130"``."""
    if not code:
        return ""
    return "".join(code.split()).replace(".", "")


def find_gst_rate(code: str, on_date: Optional[date] = None) -> Optional[GSTRateRow]:
    """
    Find the rate row for an HSN or SAC code valid on ``on_date`` (default today).

    HSN codes are matched before SAC codes. An exact match wins; otherwise a
    6 or 8 digit HSN code falls back to its 4-digit heading.
    Returns None when nothing matches.
    """
    code = normalize_code(code)
    if not code:
        return None
    on_date = on_date or date.today()
    candidates = [r for r in get_gst_rates() if r.is_valid_for_date(on_date)]

    for rate in candidates:
        if rate.hsn_code == code:
            return rate
    for rate in candidates:
        if rate.sac_code == code:
            return rate

    if code.isdigit() and len(code) > 4:
        heading = code[:4]
        for rate in candidates:
            if rate.hsn_code == heading:
                return rate
    return None
