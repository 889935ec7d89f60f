from typing import List, Optional, Dict, Any
from pydantic import BaseModel


class CartLine(BaseModel):
    """One cart reference resolved at read time. `pet` is None once the listing is gone."""
    id: str
    pet: Optional[Dict[str, Any]] = None


class CartResponse(BaseModel):
    cart: List[str]
    items: List[CartLine]


class OrderRecord(BaseModel):
    orderNumber: int
    items: List[str]
    createdAt: str


class OrderListResponse(BaseModel):
    orders: List[OrderRecord]
