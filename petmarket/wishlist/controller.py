# petmarket/wishlist/controller.py
from typing import Optional
from fastapi import APIRouter

from ..auth.service import CurrentUser, ensure_same_user
from ..core.exceptions import PetMarketError, ServerError
from ..database.core import DbSession
from ..logging import logger
from ..pets.service import serialize_pet
from .models import LikedPetsRequest, WishlistRequest
from .service import WishlistService

router = APIRouter(tags=["wishlist"])


@router.post("/like-pet")
async def like_pet(payload: WishlistRequest, current_user: CurrentUser, db: DbSession):
    try:
        user_id = ensure_same_user(current_user, payload.userId)
        WishlistService.like(db, user_id, payload.petId)
        return {"message": "liked success."}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Error liking pet: {e}")
        db.rollback()
        raise ServerError(str(e))


@router.post("/remove-from-wishlist")
async def remove_from_wishlist(payload: WishlistRequest, current_user: CurrentUser, db: DbSession):
    try:
        user_id = ensure_same_user(current_user, payload.userId)
        WishlistService.unlike(db, user_id, payload.petId)
        return {"message": "Pet removed from wishlist successfully."}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Error removing pet from wishlist: {e}")
        db.rollback()
        raise ServerError(str(e))


@router.post("/liked-pets")
async def liked_pets(current_user: CurrentUser, db: DbSession, payload: Optional[LikedPetsRequest] = None):
    try:
        user_id = ensure_same_user(current_user, payload.userId if payload else None)
        pets = WishlistService.liked_pets(db, user_id)
        return {"message": "success", "pets": [serialize_pet(p) for p in pets]}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Error reading liked pets: {e}")
        raise ServerError(str(e))
