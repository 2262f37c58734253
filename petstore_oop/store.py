"""The pet store: a collection of pets that can all be asked to speak."""

import logging
from typing import Iterator, List, Optional, Tuple

from petstore_oop.errors import PetStoreError
from petstore_oop.pets import Animal

logger = logging.getLogger(__name__)


class PetStore:
    """Holds pets in the order they arrived."""

    def __init__(self, name: str = "Happy Paws"):
        self.name = name
        self._pets: List[Animal] = []

    def add_pet(self, pet: Animal) -> "PetStore":
        """Add a pet to the store.

        Args:
            pet: Any ``Animal`` subclass instance

        Returns:
            PetStore: The store itself, so calls can be chained
        """
        if not isinstance(pet, Animal):
            raise PetStoreError(f"Only animals can join the store, got {type(pet).__name__}")
        self._pets.append(pet)
        logger.debug(f"{self.name}: added {pet!r} ({len(self._pets)} pets)")
        return self

    @property
    def pets(self) -> Tuple[Animal, ...]:
        """Read-only view of the pets."""
        return tuple(self._pets)

    def find(self, name: str) -> Optional[Animal]:
        """Return the first pet with this name, or None."""
        for pet in self._pets:
            if pet.name == name:
                return pet
        return None

    def make_all_speak(self) -> List[str]:
        """Ask every pet to speak, in insertion order."""
        return [pet.speak() for pet in self._pets]

    def __len__(self):
        return len(self._pets)

    def __iter__(self) -> Iterator[Animal]:
        return iter(self._pets)

    def __str__(self):
        return f"{self.name}: {len(self._pets)} pets"
