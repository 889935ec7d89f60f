from sqlalchemy.orm import Session
from typing import List

from ..entities.pet import Pet
from ..logging import logger
from ..pets.service import PetService
from ..users.service import UserService


class WishlistService:

    @staticmethod
    def like(db: Session, user_id: str, pet_id: str) -> List[str]:
        """Add `pet_id` once; liking an already liked pet changes nothing."""
        user = UserService.get_user_by_id(db, user_id)
        liked = list(user.liked_pets or [])
        if pet_id not in liked:
            user.liked_pets = liked + [pet_id]
            db.commit()
            logger.info(f"User {user_id} liked pet {pet_id}")
        return user.liked_pets

    @staticmethod
    def unlike(db: Session, user_id: str, pet_id: str) -> List[str]:
        """Drop every occurrence of `pet_id`."""
        user = UserService.get_user_by_id(db, user_id)
        user.liked_pets = [p for p in (user.liked_pets or []) if p != pet_id]
        db.commit()
        logger.info(f"User {user_id} removed pet {pet_id} from wishlist")
        return user.liked_pets

    @staticmethod
    def liked_pets(db: Session, user_id: str) -> List[Pet]:
        """Liked listings in wishlist order, skipping listings deleted since."""
        user = UserService.get_user_by_id(db, user_id)
        liked = list(user.liked_pets or [])
        found = PetService.resolve_many(db, liked)
        return [found[p] for p in liked if p in found]
