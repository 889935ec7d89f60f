from sqlalchemy.orm import Session
from typing import Any, Dict, List

from ..entities.user import User
from ..core.exceptions import UserNotFoundError
from ..logging import logger
from .models import AddressRequest, CardDetailsRequest


class UserService:

    @staticmethod
    def get_user_by_id(db: Session, user_id: str) -> User:
        """Load the aggregate or raise UserNotFoundError."""
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            logger.warning(f"User not found with ID: {user_id}")
            raise UserNotFoundError()
        return user

    @staticmethod
    def add_address(db: Session, user_id: str, address: AddressRequest) -> List[Dict[str, Any]]:
        user = UserService.get_user_by_id(db, user_id)
        user.addresses = list(user.addresses or []) + [address.model_dump()]
        db.commit()
        logger.info(f"Address added for user ID: {user_id}")
        return user.addresses

    @staticmethod
    def get_addresses(db: Session, user_id: str) -> List[Dict[str, Any]]:
        user = UserService.get_user_by_id(db, user_id)
        return list(user.addresses or [])

    @staticmethod
    def save_card_entry(db: Session, user_id: str, card: CardDetailsRequest) -> List[Dict[str, Any]]:
        user = UserService.get_user_by_id(db, user_id)
        user.card_entries = list(user.card_entries or []) + [card.model_dump()]
        db.commit()
        logger.info(f"Card details saved for user ID: {user_id}")
        return user.card_entries
