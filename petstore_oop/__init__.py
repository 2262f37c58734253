"""Pet Store: an introductory Object-Oriented Programming tutorial."""

__version__ = "0.1.0"

from petstore_oop.errors import (
    InvalidPetNameError,
    LessonNotFoundError,
    PetStoreError,
    QuizError,
)
from petstore_oop.pets import Animal, Bird, Cat, Dog
from petstore_oop.store import PetStore

__all__ = [
    "__version__",
    "Animal",
    "Bird",
    "Cat",
    "Dog",
    "PetStore",
    "PetStoreError",
    "InvalidPetNameError",
    "LessonNotFoundError",
    "QuizError",
]
