from typing import Optional
from pydantic import BaseModel


class WishlistRequest(BaseModel):
    petId: str
    userId: Optional[str] = None


class LikedPetsRequest(BaseModel):
    userId: Optional[str] = None
