from typing import Optional
from pydantic import BaseModel


class OwnerRequest(BaseModel):
    """Body of /my-pets. `userId` is optional and must match the token."""
    userId: Optional[str] = None


class RemovePetRequest(BaseModel):
    petId: str
