from sqlalchemy.orm import Session
from typing import Any, Dict, List
from datetime import datetime, timezone

from ..entities.user import User
from ..core.exceptions import InvalidProductIdError, UserNotFoundError
from ..logging import logger
from ..pets.service import PetService, serialize_pet
from ..users.service import UserService
from .models import CartLine, CartResponse, OrderRecord

def is_valid_product_id(product_id: Any) -> bool:
    return isinstance(product_id, str) and bool(product_id.strip())


class CartService:

    @staticmethod
    def add_to_cart(db: Session, user_id: str, product_id: Any) -> List[str]:
        """Append a reference. Duplicates are kept; the id is not checked against listings."""
        user = UserService.get_user_by_id(db, user_id)
        if not is_valid_product_id(product_id):
            raise InvalidProductIdError(product_id)

        user.cart = list(user.cart or []) + [product_id]
        db.commit()
        logger.info(f"Product {product_id} added to cart of user ID: {user_id}")
        return user.cart

    @staticmethod
    def get_cart(db: Session, user_id: str) -> CartResponse:
        user = UserService.get_user_by_id(db, user_id)
        cart = list(user.cart or [])
        found = PetService.resolve_many(db, cart)
        items = [CartLine(id=ref, pet=serialize_pet(found.get(ref))) for ref in cart]
        return CartResponse(cart=cart, items=items)

    @staticmethod
    def empty_cart(db: Session, user_id: str) -> None:
        user = UserService.get_user_by_id(db, user_id)
        user.cart = []
        db.commit()
        logger.info(f"Cart emptied for user ID: {user_id}")

    @staticmethod
    def move_cart_to_orders(db: Session, user_id: str) -> OrderRecord:
        """
        Snapshot the cart into a new order numbered len(orders) + 1 and clear
        the cart, in one commit. The row lock keeps two concurrent moves from
        taking the same order number where the backend supports FOR UPDATE.
        """
        user = db.query(User).filter(User.id == user_id).with_for_update().first()
        if not user:
            raise UserNotFoundError()

        orders = list(user.orders or [])
        order = OrderRecord(
            orderNumber=len(orders) + 1,
            items=list(user.cart or []),
            createdAt=datetime.now(timezone.utc).isoformat(),
        )
        user.orders = orders + [order.model_dump()]
        user.cart = []
        db.commit()

        logger.info(f"Cart items moved to order #{order.orderNumber} for user ID: {user_id}")
        return order

    @staticmethod
    def get_orders(db: Session, user_id: str) -> List[Dict[str, Any]]:
        user = UserService.get_user_by_id(db, user_id)
        return list(user.orders or [])
