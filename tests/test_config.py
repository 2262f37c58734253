"""Tests for tutorial configuration."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from petstore_oop.config import (
    PetKind,
    PetSpec,
    Settings,
    TutorialConfig,
    load_config,
    load_config_from_env,
    load_config_from_yaml,
)
from petstore_oop.errors import PetStoreError


def test_tutorial_config_default():
    """Test default tutorial configuration."""
    config = TutorialConfig()
    assert config.store_name == "Happy Paws"
    assert config.include_tips is True
    assert config.include_quiz is True
    assert config.output_path == Path("docs/pet_store_oop_tutorial.md")
    assert config.quiz_pass_mark == 70.0
    assert [(p.name, p.kind) for p in config.default_pets] == [
        ("Buddy", PetKind.DOG),
        ("Whiskers", PetKind.CAT),
    ]


def test_pass_mark_bounds():
    """Test that the pass mark must be a percentage."""
    with pytest.raises(ValueError):
        TutorialConfig(quiz_pass_mark=120)


def test_pet_spec_parse():
    """Test parsing NAME:KIND pet specs."""
    spec = PetSpec.parse("Tweety:Bird")
    assert spec.name == "Tweety"
    assert spec.kind == PetKind.BIRD


@pytest.mark.parametrize("text", ["Buddy", ":dog", "Nibbles:hamster"])
def test_pet_spec_parse_invalid(text):
    """Test invalid pet specs raise PetStoreError."""
    with pytest.raises(PetStoreError):
        PetSpec.parse(text)


def test_settings_to_tutorial_config():
    """Test converting settings to tutorial configuration."""
    settings = Settings(store_name="Corner Shop", include_quiz=False, quiz_pass_mark=50)
    config = settings.to_tutorial_config()
    assert config.store_name == "Corner Shop"
    assert config.include_quiz is False
    assert config.quiz_pass_mark == 50


def test_load_config_from_env():
    """Test environment variables are picked up."""
    with patch.dict(
        os.environ,
        {"PETSTORE_STORE_NAME": "Env Pets", "PETSTORE_INCLUDE_TIPS": "false"},
        clear=True,
    ):
        config = load_config_from_env()
    assert config.store_name == "Env Pets"
    assert config.include_tips is False


def test_load_config_from_yaml(tmp_path):
    """Test loading configuration from YAML."""
    path = tmp_path / "petstore.yaml"
    path.write_text(
        "store_name: YAML Pets\n"
        "default_pets:\n"
        "  - name: Tweety\n"
        "    kind: bird\n"
    )
    config = load_config_from_yaml(path)
    assert config.store_name == "YAML Pets"
    assert config.default_pets[0].kind == PetKind.BIRD
    assert load_config(path).store_name == "YAML Pets"


def test_load_config_from_empty_yaml(tmp_path):
    """Test an empty YAML file gives defaults."""
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config_from_yaml(path) == TutorialConfig()


def test_load_config_from_malformed_yaml(tmp_path):
    """Test that YAML syntax errors are reported as PetStoreError."""
    path = tmp_path / "bad.yaml"
    path.write_text("store_name: [unclosed\n")
    with pytest.raises(PetStoreError, match="Invalid YAML"):
        load_config_from_yaml(path)


@pytest.mark.parametrize("content", ["hello\n", "- Buddy\n- Whiskers\n"])
def test_load_config_from_non_mapping_yaml(tmp_path, content):
    """Test that a YAML file must hold a mapping."""
    path = tmp_path / "petstore.yaml"
    path.write_text(content)
    with pytest.raises(PetStoreError, match="Expected a mapping"):
        load_config_from_yaml(path)
