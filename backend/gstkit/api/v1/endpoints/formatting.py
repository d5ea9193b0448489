from fastapi import APIRouter
from gstkit.schemas.formatting import AmountFormatRequest, AmountFormatResponse, FinancialYearResponse
from gstkit.services.indian_format import (
    convert_currency_to_words,
    format_indian_currency,
    format_indian_number,
    get_financial_year,
)

router = APIRouter()


@router.post("/amount", response_model=AmountFormatResponse)
async def format_amount(request: AmountFormatRequest):
    """Indian-grouped number, rupee string and amount in words for an invoice total"""
    return AmountFormatResponse(
        amount=request.amount,
        formatted_number=format_indian_number(request.amount, request.decimals),
        formatted_currency=format_indian_currency(request.amount),
        amount_in_words=convert_currency_to_words(request.amount),
    )


@router.get("/financial-year", response_model=FinancialYearResponse)
async def financial_year():
    return FinancialYearResponse(financial_year=get_financial_year())
