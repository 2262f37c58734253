"""The pets that live in the tutorial's store.

Every lesson builds on these few classes:

- ``Animal`` is the abstract parent. It owns the name (encapsulated behind a
  property) and the shape of ``speak()``.
- ``Dog``, ``Cat`` and ``Bird`` inherit from it and only say which sound they
  make, so calling ``speak()`` on any of them is polymorphic.
"""

import logging
from abc import ABC, abstractmethod

from petstore_oop.errors import InvalidPetNameError, PetStoreError

logger = logging.getLogger(__name__)


class Animal(ABC):
    """Base class for every pet in the store."""

    # Class attribute (shared by all instances)
    species = "Animalia"

    def __init__(self, name: str):
        """Initialize a pet with its name."""
        # Goes through the property setter below, so validation runs here too
        self.name = name

    @property
    def name(self) -> str:
        """Get the pet's name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        """Set the name, rejecting anything that is not a non-empty string."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidPetNameError(f"Pet name must be a non-empty string, got {value!r}")
        self._name = value.strip()

    @abstractmethod
    def make_sound(self) -> str:
        """Return the sound this kind of animal makes."""

    def speak(self) -> str:
        """Return what the pet says."""
        return f"{self.name} says: {self.make_sound()}"

    def move(self) -> str:
        return f"{self.name} walks"

    def describe(self) -> str:
        return f"{self.name} the {type(self).__name__} ({self.species})"

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"


class Dog(Animal):
    """A dog that extends Animal."""

    species = "Canis familiaris"

    def make_sound(self) -> str:
        return "Woof!"

    def fetch(self) -> str:
        """Only dogs know this trick."""
        return f"{self.name} fetches the ball"


class Cat(Animal):
    """A cat that extends Animal."""

    species = "Felis catus"

    def make_sound(self) -> str:
        return "Meow!"


class Bird(Animal):
    """A bird that extends Animal and overrides how it moves."""

    species = "Aves"

    def make_sound(self) -> str:
        return "Tweet!"

    def move(self) -> str:
        """Override parent method."""
        return f"{self.name} flies"


PET_KINDS = {
    "dog": Dog,
    "cat": Cat,
    "bird": Bird,
}


def create_pet(kind: str, name: str) -> Animal:
    """Create a pet from a kind keyword such as ``"dog"``.

    Args:
        kind: One of the keys of ``PET_KINDS`` (case-insensitive)
        name: The pet's name

    Returns:
        Animal: The new pet

    Raises:
        PetStoreError: If the kind is unknown
    """
    pet_class = PET_KINDS.get(kind.strip().lower())
    if pet_class is None:
        valid = ", ".join(sorted(PET_KINDS))
        raise PetStoreError(f"Unknown pet kind '{kind}'. Valid options are: {valid}")
    pet = pet_class(name)
    logger.debug(f"Created {pet!r}")
    return pet
