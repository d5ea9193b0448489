from gstkit.schemas.gst import (
    TaxRate,
    GstCalculation,
    GSTRateResponse,
    GstinInfo,
)
from gstkit.schemas.formatting import AmountFormatRequest, AmountFormatResponse

__all__ = [
    "TaxRate",
    "GstCalculation",
    "GSTRateResponse",
    "GstinInfo",
    "AmountFormatRequest",
    "AmountFormatResponse",
]
