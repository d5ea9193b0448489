from pydantic import BaseModel
from decimal import Decimal


class AmountFormatRequest(BaseModel):
    amount: Decimal
    decimals: int = 2


class AmountFormatResponse(BaseModel):
    amount: Decimal
    formatted_number: str
    formatted_currency: str
    amount_in_words: str


class FinancialYearResponse(BaseModel):
    financial_year: str
