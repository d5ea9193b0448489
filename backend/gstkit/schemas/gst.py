from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date
from decimal import Decimal


class TaxRate(BaseModel):
    """Percentages applied to a taxable amount. Non-negativity is checked by the calculator."""
    model_config = ConfigDict(frozen=True)

    cgst_rate: Decimal
    sgst_rate: Decimal
    igst_rate: Decimal
    cess_rate: Decimal = Decimal("0")

    def is_symmetric(self) -> bool:
        """True when CGST == SGST and CGST + SGST == IGST (rate table convention)."""
        return self.cgst_rate == self.sgst_rate and self.cgst_rate + self.sgst_rate == self.igst_rate


class GstCalculation(BaseModel):
    model_config = ConfigDict(frozen=True)

    taxable_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    cess: Decimal
    total_tax: Decimal
    total: Decimal
    cgst_rate: Decimal
    sgst_rate: Decimal
    igst_rate: Decimal
    cess_rate: Decimal
    is_interstate: bool


class GSTRateResponse(BaseModel):
    id: int
    name: str
    tax_category: str
    hsn_code: Optional[str] = None
    sac_code: Optional[str] = None
    cgst_rate: Decimal
    sgst_rate: Decimal
    igst_rate: Decimal
    cess_rate: Decimal
    total_gst_rate: Decimal
    effective_from: date
    effective_to: Optional[date] = None
    is_active: bool

    class Config:
        from_attributes = True


class GstCalculationRequest(BaseModel):
    hsn_or_sac_code: str
    amount: Decimal
    supplier_state: Optional[str] = None  # 2-digit state code or full GSTIN
    customer_state: Optional[str] = None
    on_date: Optional[date] = None


class GstCategoryRequest(BaseModel):
    tax_category: str  # GST_0, GST_5, GST_12, GST_18, GST_28
    amount: Decimal
    is_interstate: bool


class GstRatesCalculationRequest(BaseModel):
    amount: Decimal
    rates: TaxRate
    is_interstate: bool = False


class GstinValidationRequest(BaseModel):
    gstin: str


class GstinInfo(BaseModel):
    gstin: str
    is_valid: bool
    state_code: Optional[str] = None
    state_name: Optional[str] = None
    pan: Optional[str] = None


class StateCodeResponse(BaseModel):
    gstin: str
    state_code: Optional[str] = None
    state_name: Optional[str] = None


class StateResponse(BaseModel):
    code: str
    name: str
