# petmarket/users/controller.py
from fastapi import APIRouter

from ..auth.service import CurrentUser
from ..core.exceptions import AuthenticationError, PetMarketError, ServerError
from ..database.core import DbSession
from ..logging import logger
from .models import AddressRequest, CardDetailsRequest, UserEmailResponse
from .service import UserService

router = APIRouter(tags=["users"])


@router.get("/get-user", response_model=UserEmailResponse)
async def get_user(current_user: CurrentUser, db: DbSession):
    """Resolve the bearer token to the account email."""
    try:
        user = UserService.get_user_by_id(db, current_user.user_id)
        return UserEmailResponse(email=user.username)
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to resolve user from token: {e}")
        raise AuthenticationError(technical_details=str(e))


@router.post("/add-address")
async def add_address(address: AddressRequest, current_user: CurrentUser, db: DbSession):
    try:
        UserService.add_address(db, current_user.user_id, address)
        return {"message": "Address added successfully"}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to add address: {e}")
        db.rollback()
        raise ServerError(str(e))


@router.get("/get-addresses")
async def get_addresses(current_user: CurrentUser, db: DbSession):
    try:
        return {"addresses": UserService.get_addresses(db, current_user.user_id)}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to read addresses: {e}")
        raise ServerError(str(e))


@router.post("/save-card-details")
async def save_card_details(card: CardDetailsRequest, current_user: CurrentUser, db: DbSession):
    try:
        UserService.save_card_entry(db, current_user.user_id, card)
        return {"message": "Card details saved successfully"}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to save card details: {e}")
        db.rollback()
        raise ServerError(str(e))
