from pydantic import BaseModel
from typing import Optional


class CheckoutRequest(BaseModel):
    # Values are forwarded unchecked; the provider owns amount/currency validation.
    amount: int
    currency: str
    country: Optional[str] = None
