# petmarket/pets/controller.py
from typing import Optional
from fastapi import APIRouter, File, Form, UploadFile

from ..auth.service import CurrentUser, ensure_same_user
from ..core.exceptions import PetMarketError, ServerError
from ..database.core import DbSession
from ..logging import logger
from ..utils.uploads import remove_upload, save_upload
from .models import OwnerRequest, RemovePetRequest
from .service import PetService, serialize_pet

router = APIRouter(tags=["pets"])


@router.post("/add-pet")
async def add_pet(
    current_user: CurrentUser,
    db: DbSession,
    pimage: UploadFile = File(...),
    pname: Optional[str] = Form(None),
    pdesc: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    contactNumber: Optional[str] = Form(None),
    userId: Optional[str] = Form(None),
):
    """Create a listing owned by the caller from a multipart form."""
    image_path = None
    try:
        owner_id = ensure_same_user(current_user, userId)
        image_path = await save_upload(pimage, "pimage")
        fields = {
            "pname": pname,
            "pdesc": pdesc,
            "price": price,
            "category": category,
            "contactNumber": contactNumber,
        }
        PetService.create_pet(db, owner_id, fields, image_path)
        return {"message": "Pet saved successfully"}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to save pet: {e}")
        db.rollback()
        if image_path:
            remove_upload(image_path)
        raise ServerError(str(e))


@router.get("/get-pets")
async def get_pets(db: DbSession):
    try:
        pets = PetService.list_all(db)
        return {"message": "success", "pets": [serialize_pet(p) for p in pets]}
    except Exception as e:
        logger.exception(f"Failed to list pets: {e}")
        raise ServerError(str(e))


@router.get("/get-pet/{pet_id}")
async def get_pet(pet_id: str, db: DbSession):
    """`pet` is null when no listing has this id."""
    try:
        pet = PetService.get_by_id(db, pet_id)
        return {"message": "success", "pet": serialize_pet(pet)}
    except Exception as e:
        logger.exception(f"Failed to read pet {pet_id}: {e}")
        raise ServerError(str(e))


@router.post("/my-pets")
async def my_pets(current_user: CurrentUser, db: DbSession, payload: Optional[OwnerRequest] = None):
    try:
        owner_id = ensure_same_user(current_user, payload.userId if payload else None)
        pets = PetService.list_by_owner(db, owner_id)
        return {"message": "success", "pets": [serialize_pet(p) for p in pets]}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Failed to list pets for owner: {e}")
        raise ServerError(str(e))


@router.post("/remove-pet")
async def remove_pet(payload: RemovePetRequest, db: DbSession):
    try:
        PetService.delete_pet(db, payload.petId)
        return {"message": "Pet removed successfully."}
    except PetMarketError:
        raise
    except Exception as e:
        logger.exception(f"Error removing pet: {e}")
        db.rollback()
        raise ServerError(str(e))
