"""Exceptions raised by the pet store tutorial package."""


class PetStoreError(Exception):
    """Base class for all pet store tutorial errors."""


class InvalidPetNameError(PetStoreError, ValueError):
    """Raised when a pet is given an empty or non-string name."""


class LessonNotFoundError(PetStoreError, KeyError):
    """Raised when a lesson number or slug does not exist."""

    def __str__(self):
        # KeyError quotes its argument, keep the plain message
        return str(self.args[0]) if self.args else ""


class QuizError(PetStoreError):
    """Raised for invalid quiz answers."""
