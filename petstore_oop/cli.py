"""Command-line interface for the Pet Store tutorial."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from petstore_oop import __version__ as PETSTORE_VERSION
from petstore_oop.config import PetSpec, TutorialConfig, load_config
from petstore_oop.errors import PetStoreError
from petstore_oop.lessons import LESSONS, get_lesson, verify_lessons
from petstore_oop.pets import create_pet
from petstore_oop.quiz import Quiz
from petstore_oop.store import PetStore
from petstore_oop.tutorial import write_tutorial

app = typer.Typer(
    name="petstore-oop",
    help="Learn Object-Oriented Programming with a pet store",
    no_args_is_help=True,
)
console = Console()


def setup_logging(verbose: bool = False):
    """Setup logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def _config(ctx: typer.Context) -> TutorialConfig:
    if ctx.obj is None:
        ctx.obj = TutorialConfig()
    return ctx.obj


def _fail(message: str):
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to YAML configuration file (default: PETSTORE_* environment variables)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):
    """Pet Store OOP tutorial.

    Examples:
        # List the lessons
        petstore-oop lessons

        # Read and run lesson 3
        petstore-oop show 3
        petstore-oop run encapsulation

        # Check every Output block and write the tutorial
        petstore-oop verify
        petstore-oop render --output tutorial.md
    """
    try:
        tutorial_config = load_config(config)
    except (OSError, ValueError, PetStoreError) as e:
        _fail(f"Could not load configuration: {e}")
    setup_logging(verbose or tutorial_config.verbose)
    ctx.obj = tutorial_config


@app.command()
def lessons():
    """List the lessons."""
    table = Table(title="Pet Store OOP Tutorial")
    table.add_column("#", justify="right")
    table.add_column("Slug", no_wrap=True)
    table.add_column("Title")
    table.add_column("Pillar")
    for lesson in LESSONS:
        table.add_row(str(lesson.number), lesson.slug, lesson.title, lesson.pillar or "")
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    lesson: str = typer.Argument(..., help="Lesson number or slug"),
):
    """Show a lesson's explanation, code and expected output."""
    try:
        selected = get_lesson(lesson)
    except PetStoreError as e:
        _fail(str(e))

    console.print(f"[bold]{selected.number}. {selected.title}[/bold]")
    if selected.pillar:
        console.print(f"[dim]Pillar: {selected.pillar}[/dim]")
    console.print(f"\n{selected.explanation}\n")
    console.print(selected.snippet, markup=False, highlight=False)
    console.print("\n[bold]Output:[/bold]")
    for line in selected.expected_output:
        console.print(line, markup=False, highlight=False)
    if _config(ctx).include_tips and selected.tips:
        console.print("\n[bold]Teaching tips[/bold]")
        for tip in selected.tips:
            console.print(f"  - {tip}", markup=False, highlight=False)


@app.command()
def run(
    lesson: str = typer.Argument(..., help="Lesson number or slug"),
):
    """Run a lesson's example and print what it prints."""
    try:
        selected = get_lesson(lesson)
    except PetStoreError as e:
        _fail(str(e))
    for line in selected.run():
        console.print(line, markup=False, highlight=False)


@app.command()
def demo(
    ctx: typer.Context,
    pet: Optional[List[str]] = typer.Option(
        None,
        "--pet",
        "-p",
        help="Pet to add as NAME:KIND (dog, cat or bird). Repeatable.",
    ),
):
    """Stock a store and ask every pet to speak."""
    config = _config(ctx)
    try:
        specs = [PetSpec.parse(text) for text in pet] if pet else config.default_pets
        store = PetStore(config.store_name)
        for spec in specs:
            store.add_pet(create_pet(spec.kind.value, spec.name))
    except PetStoreError as e:
        _fail(str(e))

    console.print(f"[bold]{escape(str(store))}[/bold]")
    for line in store.make_all_speak():
        console.print(line, markup=False, highlight=False)


@app.command()
def verify():
    """Check that every lesson prints exactly its Output block."""
    checks = verify_lessons()
    failed = [check for check in checks if not check.passed]
    for check in checks:
        mark = "[green]✓[/green]" if check.passed else "[red]✗[/red]"
        console.print(f"{mark} {check.lesson.number}. {check.lesson.title}")
        if not check.passed:
            console.print(check.diff, markup=False, highlight=False)

    if failed:
        console.print(f"[red]{len(failed)} of {len(checks)} lessons do not match their output[/red]")
        raise typer.Exit(1)
    console.print(f"[green]All {len(checks)} lessons match their output[/green]")


@app.command()
def render(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output markdown path (default: from config)",
    ),
    tips: Optional[bool] = typer.Option(
        None,
        "--tips/--no-tips",
        help="Include teaching tips (default: from config)",
    ),
    quiz: Optional[bool] = typer.Option(
        None,
        "--quiz/--no-quiz",
        help="Include the quiz section (default: from config)",
    ),
):
    """Write the tutorial as markdown."""
    config = _config(ctx)
    path = write_tutorial(
        output or config.output_path,
        include_tips=config.include_tips if tips is None else tips,
        include_quiz=config.include_quiz if quiz is None else quiz,
    )
    console.print(f"[green]✓ Wrote tutorial: {path}[/green]")


@app.command("quiz")
def quiz_command(
    ctx: typer.Context,
    lesson: Optional[int] = typer.Option(
        None,
        "--lesson",
        "-l",
        help="Only ask questions for this lesson",
    ),
):
    """Take the review quiz."""
    config = _config(ctx)
    session = Quiz()
    if lesson is not None:
        session = session.for_lesson(lesson)
    if not session.questions:
        _fail(f"No questions for lesson {lesson}")

    for question in session.questions:
        console.print(f"\n[bold]Question {question.id}[/bold] [dim]({question.difficulty}, lesson {question.lesson})[/dim]")
        console.print(question.question, markup=False, highlight=False)
        for i, option in enumerate(question.options, 1):
            console.print(f"  {i}. {option}", markup=False, highlight=False)
        while True:
            choice = typer.prompt(f"Your answer (1-{len(question.options)})", type=int)
            try:
                is_correct = session.answer(question, choice - 1)
                break
            except PetStoreError as e:
                console.print(f"[yellow]{escape(str(e))}[/yellow]")
        if is_correct:
            console.print("[green]✓ CORRECT![/green]")
        else:
            console.print(f"[red]✗ INCORRECT[/red] Correct answer: {question.correct_option}", highlight=False)
        console.print(f"[dim]{question.explanation}[/dim]", highlight=False)

    console.print(f"\n[bold]Score: {session.score}/{session.total} ({session.percentage:.1f}%)[/bold]")
    console.print(session.rating())
    if not session.passed(config.quiz_pass_mark):
        raise typer.Exit(1)


@app.command()
def init(
    output: Path = typer.Option(
        Path("petstore.yaml"),
        "--output",
        "-o",
        help="Output configuration file path (default: petstore.yaml)",
    ),
):
    """Create a starter YAML configuration file."""
    config_content = """# Pet Store tutorial configuration
store_name: Happy Paws
include_tips: true
include_quiz: true
output_path: docs/pet_store_oop_tutorial.md
quiz_pass_mark: 70

# Pets stocked by `petstore-oop demo`
default_pets:
  - name: Buddy
    kind: dog
  - name: Whiskers
    kind: cat
"""

    with open(output, "w") as f:
        f.write(config_content)

    console.print(f"[green]✓ Created configuration file: {output}[/green]")
    console.print("[dim]Use it with:[/dim]")
    console.print(f"[dim]  petstore-oop --config {output} demo[/dim]")


@app.command()
def version():
    """Show version information."""
    console.print(f"Pet Store OOP Tutorial v{PETSTORE_VERSION}")


if __name__ == "__main__":
    app()
