# petmarket/cart/controller.py
from fastapi import APIRouter

from ..auth.service import CurrentUser
from ..core.exceptions import PetMarketError, ServerError
from ..database.core import DbSession
from ..logging import logger
from .models import CartResponse, OrderListResponse
from .service import CartService

router = APIRouter(tags=["cart"])


@router.post("/add-to-cart/{product_id}")
async def add_to_cart(product_id: str, current_user: CurrentUser, db: DbSession):
    try:
        CartService.add_to_cart(db, current_user.user_id, product_id)
        return {"message": "Product added to cart successfully"}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to add product to cart: {e}")
        db.rollback()
        raise ServerError(str(e))


@router.get("/get-cart", response_model=CartResponse)
async def get_cart(current_user: CurrentUser, db: DbSession):
    """Raw cart references plus each one resolved to its listing, or null."""
    try:
        return CartService.get_cart(db, current_user.user_id)
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to read cart: {e}")
        raise ServerError(str(e))


@router.delete("/empty-cart")
async def empty_cart(current_user: CurrentUser, db: DbSession):
    try:
        CartService.empty_cart(db, current_user.user_id)
        return {"message": "Cart emptied successfully"}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to empty cart: {e}")
        db.rollback()
        raise ServerError(str(e))


@router.post("/move-to-orders")
async def move_to_orders(current_user: CurrentUser, db: DbSession):
    try:
        CartService.move_cart_to_orders(db, current_user.user_id)
        return {"message": "Items moved to orders successfully"}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Error moving cart items to orders: {e}")
        db.rollback()
        raise ServerError(str(e))


@router.get("/get-orders", response_model=OrderListResponse)
async def get_orders(current_user: CurrentUser, db: DbSession):
    try:
        return {"orders": CartService.get_orders(db, current_user.user_id)}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to read orders: {e}")
        raise ServerError(str(e))
