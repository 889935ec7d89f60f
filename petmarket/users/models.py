from typing import Optional
from pydantic import BaseModel


class AddressRequest(BaseModel):
    street: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class CardDetailsRequest(BaseModel):
    """Stored as given. No format checks on number, expiry or CVV."""
    cardNumber: Optional[str] = None
    cardHolder: Optional[str] = None
    expiryDate: Optional[str] = None
    cvv: Optional[str] = None


class UserEmailResponse(BaseModel):
    email: str
