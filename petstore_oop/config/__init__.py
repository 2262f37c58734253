"""Configuration management for the Pet Store tutorial."""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from petstore_oop.errors import PetStoreError

logger = logging.getLogger(__name__)


class PetKind(str, Enum):
    """Kinds of pets the demo store can stock."""

    DOG = "dog"
    CAT = "cat"
    BIRD = "bird"


class PetSpec(BaseModel):
    """A pet to put in the demo store."""

    name: str = Field(..., min_length=1, description="Pet name")
    kind: PetKind = Field(..., description="Kind of pet")

    @classmethod
    def parse(cls, text: str) -> "PetSpec":
        """Parse ``"Buddy:dog"`` into a PetSpec."""
        name, sep, kind = text.rpartition(":")
        if not sep or not name.strip():
            raise PetStoreError(f"Invalid pet '{text}'. Use NAME:KIND, e.g. Buddy:dog")
        try:
            return cls(name=name.strip(), kind=kind.strip().lower())
        except ValueError as e:
            raise PetStoreError(f"Invalid pet '{text}': {e}") from e


def _default_pets() -> List[PetSpec]:
    return [
        PetSpec(name="Buddy", kind=PetKind.DOG),
        PetSpec(name="Whiskers", kind=PetKind.CAT),
    ]


class TutorialConfig(BaseModel):
    """Configuration for rendering and running the tutorial."""

    store_name: str = Field(default="Happy Paws", description="Name of the demo store")
    include_tips: bool = Field(default=True, description="Include teaching tips")
    include_quiz: bool = Field(default=True, description="Include the quiz section")
    output_path: Path = Field(
        default=Path("docs/pet_store_oop_tutorial.md"),
        description="Where `render` writes the tutorial",
    )
    quiz_pass_mark: float = Field(default=70.0, ge=0.0, le=100.0, description="Pass mark in percent")
    default_pets: List[PetSpec] = Field(
        default_factory=_default_pets,
        description="Pets stocked by `demo` when none are given",
    )
    verbose: bool = Field(default=False, description="Enable verbose logging")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PETSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_name: str = Field(default="Happy Paws")
    include_tips: bool = Field(default=True)
    include_quiz: bool = Field(default=True)
    output_path: str = Field(default="docs/pet_store_oop_tutorial.md")
    quiz_pass_mark: float = Field(default=70.0)
    verbose: bool = Field(default=False)

    def to_tutorial_config(self) -> TutorialConfig:
        """Convert settings to tutorial configuration."""
        return TutorialConfig(
            store_name=self.store_name,
            include_tips=self.include_tips,
            include_quiz=self.include_quiz,
            output_path=Path(self.output_path),
            quiz_pass_mark=self.quiz_pass_mark,
            verbose=self.verbose,
        )


def load_config_from_yaml(path: Union[str, Path]) -> TutorialConfig:
    """Load tutorial configuration from a YAML file."""
    import yaml

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PetStoreError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise PetStoreError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    logger.debug(f"Loaded configuration from {path}")
    return TutorialConfig(**data)


def load_config_from_env() -> TutorialConfig:
    """Load tutorial configuration from environment variables."""
    settings = Settings()
    logger.debug(f"Loaded store name: {settings.store_name}")
    return settings.to_tutorial_config()


def load_config(path: Optional[Union[str, Path]] = None) -> TutorialConfig:
    """Load from YAML when a path is given, otherwise from the environment."""
    if path:
        return load_config_from_yaml(path)
    return load_config_from_env()
