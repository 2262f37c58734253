"""Tests for the CLI module."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from petstore_oop.cli import PETSTORE_VERSION, app, setup_logging
from petstore_oop.lessons import LessonCheck, get_lesson

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Keep PETSTORE_* variables and .env files out of the tests."""
    monkeypatch.chdir(tmp_path)
    for key in ("STORE_NAME", "INCLUDE_TIPS", "INCLUDE_QUIZ", "OUTPUT_PATH", "QUIZ_PASS_MARK", "VERBOSE"):
        monkeypatch.delenv(f"PETSTORE_{key}", raising=False)


def test_setup_logging():
    """Test that setup_logging works correctly."""
    setup_logging(verbose=False)
    setup_logging(verbose=True)


def test_version_command():
    """Test the version command output."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert PETSTORE_VERSION in result.stdout


def test_lessons_command():
    """Test listing lessons."""
    result = runner.invoke(app, ["lessons"])
    assert result.exit_code == 0
    assert "encapsulation" in result.stdout
    assert "pet-store" in result.stdout


def test_run_command():
    """Test running the pet store lesson."""
    result = runner.invoke(app, ["run", "7"])
    assert result.exit_code == 0
    assert "Buddy says: Woof!\nWhiskers says: Meow!" in result.stdout


def test_run_unknown_lesson():
    """Test that unknown lessons exit with an error."""
    result = runner.invoke(app, ["run", "42"])
    assert result.exit_code == 1
    assert "No lesson '42'" in result.stdout


def test_show_command():
    """Test showing a lesson."""
    result = runner.invoke(app, ["show", "encapsulation"])
    assert result.exit_code == 0
    assert "3. Encapsulation" in result.stdout
    assert 'buddy.name = "Max"' in result.stdout
    assert "Teaching tips" in result.stdout


def test_show_without_tips(tmp_path):
    """Test that config can turn tips off."""
    config = tmp_path / "petstore.yaml"
    config.write_text("include_tips: false\n")
    result = runner.invoke(app, ["--config", str(config), "show", "1"])
    assert result.exit_code == 0
    assert "Teaching tips" not in result.stdout


def test_demo_default_pets():
    """Test the demo store with default pets."""
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "Happy Paws: 2 pets" in result.stdout
    assert "Buddy says: Woof!\nWhiskers says: Meow!" in result.stdout


def test_demo_custom_pets():
    """Test the demo store with pets from the command line."""
    result = runner.invoke(app, ["demo", "--pet", "Tweety:bird", "--pet", "Rex:dog"])
    assert result.exit_code == 0
    assert "Tweety says: Tweet!\nRex says: Woof!" in result.stdout


def test_demo_invalid_pet():
    """Test that a bad pet spec exits with an error."""
    result = runner.invoke(app, ["demo", "--pet", "Nibbles:hamster"])
    assert result.exit_code == 1
    assert "Invalid pet" in result.stdout


def test_demo_store_name_from_env(monkeypatch):
    """Test that PETSTORE_STORE_NAME is honoured."""
    monkeypatch.setenv("PETSTORE_STORE_NAME", "Corner Shop")
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "Corner Shop: 2 pets" in result.stdout


def test_verify_command():
    """Test that all lessons verify."""
    result = runner.invoke(app, ["verify"])
    assert result.exit_code == 0
    assert "All 7 lessons match" in result.stdout


def test_verify_command_failure():
    """Test that a stale Output block fails verification."""
    lesson = get_lesson(1)
    stale = LessonCheck(lesson=lesson, actual=["Rex"], passed=False, diff="-Buddy\n+Rex")
    with patch("petstore_oop.cli.verify_lessons", return_value=[stale]):
        result = runner.invoke(app, ["verify"])
    assert result.exit_code == 1
    assert "-Buddy" in result.stdout


def test_render_command(tmp_path):
    """Test writing the tutorial."""
    output = tmp_path / "out" / "tutorial.md"
    result = runner.invoke(app, ["render", "--output", str(output), "--no-quiz"])
    assert result.exit_code == 0
    text = output.read_text(encoding="utf-8")
    assert "## 7. Putting It Together: The Pet Store" in text
    assert "## Quiz" not in text


def test_quiz_all_correct():
    """Test the interactive quiz for one lesson."""
    result = runner.invoke(app, ["quiz", "--lesson", "7"], input="3\n2\n")
    assert result.exit_code == 0
    assert "Score: 2/2" in result.stdout


def test_quiz_below_pass_mark():
    """Test that failing the quiz exits non-zero."""
    result = runner.invoke(app, ["quiz", "--lesson", "7"], input="1\n1\n")
    assert result.exit_code == 1
    assert "Score: 0/2" in result.stdout


def test_quiz_out_of_range_reprompts():
    """Test that out-of-range answers are asked again."""
    result = runner.invoke(app, ["quiz", "--lesson", "5"], input="9\n3\n")
    assert result.exit_code == 0
    assert "Answer must be between 1 and 4" in result.stdout


def test_quiz_unknown_lesson():
    """Test a lesson with no questions."""
    result = runner.invoke(app, ["quiz", "--lesson", "99"])
    assert result.exit_code == 1


def test_init_command(tmp_path):
    """Test the init command creates a config file that loads."""
    config_path = tmp_path / "petstore.yaml"
    result = runner.invoke(app, ["init", "--output", str(config_path)])
    assert result.exit_code == 0
    assert config_path.exists()

    result = runner.invoke(app, ["--config", str(config_path), "demo"])
    assert result.exit_code == 0
    assert "Happy Paws: 2 pets" in result.stdout


def test_missing_config_file(tmp_path):
    """Test that a missing config file exits with an error."""
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "lessons"])
    assert result.exit_code == 1
    assert "Could not load configuration" in result.stdout


@pytest.mark.parametrize(
    "content",
    [
        "store_name: [unclosed\n",
        "hello\n",
    ],
    ids=["malformed", "not-a-mapping"],
)
def test_bad_config_file(tmp_path, content):
    """Test that unreadable YAML exits with an error instead of a traceback."""
    config = tmp_path / "bad.yaml"
    config.write_text(content)
    result = runner.invoke(app, ["--config", str(config), "lessons"])
    assert result.exit_code == 1
    assert "Could not load configuration" in result.stdout
