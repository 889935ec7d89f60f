# Central models file so every table is registered on Base before create_all

from .core import Base
from ..entities.pet import Pet
from ..entities.user import User

__all__ = [
    "Base",
    "Pet",
    "User",
]
