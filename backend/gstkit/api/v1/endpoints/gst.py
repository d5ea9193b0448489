"""
GST calculation, rate lookup and GSTIN endpoints.

InvalidArgument and LookupMiss raised by the services are turned into
400/404 responses by the handlers registered in gstkit.main.
"""
from typing import List
from fastapi import APIRouter, Query
from gstkit.core.gst_rates import get_gst_rates
from gstkit.core.state_codes import STATE_CODES, get_state_name
from gstkit.schemas.gst import (
    GstCalculation,
    GstCalculationRequest,
    GstCategoryRequest,
    GstRatesCalculationRequest,
    GSTRateResponse,
    GstinInfo,
    GstinValidationRequest,
    StateCodeResponse,
    StateResponse,
)
from gstkit.services.gst_service import (
    calculate_gst,
    calculate_gst_by_category,
    calculate_gst_for_code,
    resolve_gst_rate,
)
from gstkit.services.gstin_service import describe_gstin, get_state_code_from_gstin

router = APIRouter()


@router.post("/calculate", response_model=GstCalculation)
async def calculate(request: GstCalculationRequest):
    """Calculate GST for an amount and HSN/SAC code between two states"""
    return calculate_gst_for_code(
        request.hsn_or_sac_code,
        request.amount,
        request.supplier_state,
        request.customer_state,
        on_date=request.on_date,
    )


@router.post("/calculate-by-category", response_model=GstCalculation)
async def calculate_by_category(request: GstCategoryRequest):
    """Calculate GST using a tax category (GST_5, GST_12, ...)"""
    return calculate_gst_by_category(request.tax_category, request.amount, request.is_interstate)


@router.post("/calculate-with-rates", response_model=GstCalculation)
async def calculate_with_rates(request: GstRatesCalculationRequest):
    """Calculate GST with explicit rates, e.g. for a live preview while editing an invoice line"""
    return calculate_gst(request.amount, request.rates, request.is_interstate)


@router.get("/rates", response_model=List[GSTRateResponse])
async def list_rates(active_only: bool = Query(False)):
    """List GST rates"""
    return get_gst_rates(active_only=active_only)


@router.get("/rates/active", response_model=List[GSTRateResponse])
async def list_active_rates():
    """List active GST rates"""
    return get_gst_rates(active_only=True)


@router.get("/rates/{code}", response_model=GSTRateResponse)
async def get_rate_for_code(code: str):
    """Get the rate currently applicable to an HSN or SAC code"""
    return resolve_gst_rate(code)


@router.post("/validate-gstin", response_model=GstinInfo)
async def validate_gstin(request: GstinValidationRequest):
    """Validate GSTIN format and split out state code and PAN"""
    return describe_gstin(request.gstin)


@router.get("/state-code/{gstin}", response_model=StateCodeResponse)
async def get_state_code(gstin: str):
    """Extract the state code from a GSTIN"""
    state_code = get_state_code_from_gstin(gstin)
    return StateCodeResponse(gstin=gstin, state_code=state_code, state_name=get_state_name(state_code))


@router.get("/states", response_model=List[StateResponse])
async def list_states():
    """List GST state codes"""
    return [StateResponse(code=code, name=name) for code, name in STATE_CODES.items()]
