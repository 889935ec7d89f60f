from sqlalchemy.orm import Session
from typing import Any, Dict, Iterable, List, Optional

from ..entities.pet import Pet
from ..core.exceptions import PetNotFoundError
from ..logging import logger


def serialize_pet(pet: Optional[Pet]) -> Optional[Dict[str, Any]]:
    """Wire shape of a listing, using the field names the web client expects."""
    if pet is None:
        return None
    return {
        "_id": pet.id,
        "pname": pet.pname,
        "pdesc": pet.pdesc,
        "price": pet.price,
        "category": pet.category,
        "contactNumber": pet.contact_number,
        "pimage": pet.pimage,
        "addedBy": pet.added_by,
    }


class PetService:

    @staticmethod
    def create_pet(db: Session, owner_id: str, fields: Dict[str, Optional[str]], image_path: Optional[str]) -> Pet:
        pet = Pet(
            pname=fields.get("pname"),
            pdesc=fields.get("pdesc"),
            price=fields.get("price"),
            category=fields.get("category"),
            contact_number=fields.get("contactNumber"),
            pimage=image_path,
            added_by=owner_id,
        )
        db.add(pet)
        db.commit()
        db.refresh(pet)
        logger.info(f"Pet {pet.id} listed by user ID: {owner_id}")
        return pet

    @staticmethod
    def list_all(db: Session) -> List[Pet]:
        return db.query(Pet).order_by(Pet.created_at).all()

    @staticmethod
    def get_by_id(db: Session, pet_id: str) -> Optional[Pet]:
        """None when absent; callers decide whether that is an error."""
        return db.query(Pet).filter(Pet.id == pet_id).first()

    @staticmethod
    def list_by_owner(db: Session, owner_id: str) -> List[Pet]:
        return db.query(Pet).filter(Pet.added_by == owner_id).order_by(Pet.created_at).all()

    @staticmethod
    def resolve_many(db: Session, pet_ids: Iterable[str]) -> Dict[str, Pet]:
        """Map each referenced id to its listing. Missing ids are simply absent."""
        wanted = set(pet_ids)
        if not wanted:
            return {}
        return {pet.id: pet for pet in db.query(Pet).filter(Pet.id.in_(wanted)).all()}

    @staticmethod
    def delete_pet(db: Session, pet_id: str) -> None:
        """Remove a listing. References held by carts and wishlists are left as is."""
        pet = PetService.get_by_id(db, pet_id)
        if not pet:
            raise PetNotFoundError(pet_id)
        db.delete(pet)
        db.commit()
        logger.info(f"Pet {pet_id} removed")
