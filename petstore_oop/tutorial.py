"""Render the tutorial as a markdown document."""

import logging
import re
import string
from pathlib import Path
from typing import List, Sequence, Union

from petstore_oop.lessons import LESSONS, PILLARS, Lesson
from petstore_oop.quiz import QUESTIONS, Question

logger = logging.getLogger(__name__)

TITLE = "Object-Oriented Programming with a Pet Store"

INTRODUCTION = """\
This tutorial teaches the basics of Object-Oriented Programming (OOP) in
Python with one running example: a small pet store full of dogs, cats and
birds. Each lesson shows a few lines of code and the exact output they print.
Type the code in yourself and compare."""

PILLAR_SUMMARY = {
    "Encapsulation": "Keep data behind methods that protect it (`_name` and the `name` property).",
    "Inheritance": "Reuse a parent's code in a child class (`Dog(Animal)`).",
    "Polymorphism": "One call, many behaviours (`pet.speak()`).",
    "Abstraction": "Describe what every subclass must do (`@abstractmethod make_sound`).",
}


def _anchor(lesson: Lesson) -> str:
    # GitHub heading anchors: lower case, punctuation dropped, spaces to hyphens
    heading = f"{lesson.number}. {lesson.title}".lower()
    return re.sub(r"[^\w\- ]", "", heading).replace(" ", "-")


def _render_lesson(lesson: Lesson, include_tips: bool) -> List[str]:
    lines = [f"## {lesson.number}. {lesson.title}", ""]
    if lesson.pillar:
        lines += [f"*Pillar: {lesson.pillar}*", ""]
    lines += [lesson.explanation, ""]
    if lesson.sources:
        lines += ["```python", lesson.source_code, "```", ""]
    lines += ["Try it:", "", "```python", lesson.snippet, "```", ""]
    # Output block comes from running the example, not from expected_output
    lines += ["Output:", "", "```text", *lesson.run(), "```", ""]
    if include_tips and lesson.tips:
        lines += ["**Teaching tips**", ""]
        lines += [f"- {tip}" for tip in lesson.tips]
        lines.append("")
    return lines


def _render_quiz(questions: Sequence[Question]) -> List[str]:
    lines = ["## Quiz", ""]
    for number, question in enumerate(questions, 1):
        lines.append(f"{number}. {question.question} *(lesson {question.lesson}, {question.difficulty})*")
        lines.append("")
        for letter, option in zip(string.ascii_lowercase, question.options):
            lines.append(f"   {letter}) {option}")
        lines.append("")
    lines += ["<details>", "<summary>Answers</summary>", ""]
    for number, question in enumerate(questions, 1):
        letter = string.ascii_lowercase[question.correct_answer]
        lines.append(f"{number}. **{letter}** {question.correct_option}. {question.explanation}")
    lines += ["", "</details>", ""]
    return lines


def render_markdown(
    lessons: Sequence[Lesson] = LESSONS,
    questions: Sequence[Question] = QUESTIONS,
    include_tips: bool = True,
    include_quiz: bool = True,
) -> str:
    """Render the whole tutorial.

    Args:
        lessons: Lessons, in teaching order
        questions: Quiz questions appended after the lessons
        include_tips: Add each lesson's teaching tips
        include_quiz: Add the quiz section

    Returns:
        str: Markdown text ending in a newline
    """
    lines = [f"# {TITLE}", "", INTRODUCTION, "", "## Contents", ""]
    for lesson in lessons:
        lines.append(f"{lesson.number}. [{lesson.title}](#{_anchor(lesson)})")
    lines.append("")

    for lesson in lessons:
        lines += _render_lesson(lesson, include_tips)

    if include_quiz and questions:
        lines += _render_quiz(questions)

    lines += ["## Summary: The Four Pillars", ""]
    lines += [f"- **{pillar}**: {PILLAR_SUMMARY[pillar]}" for pillar in PILLARS]

    return "\n".join(lines) + "\n"


def write_tutorial(path: Union[str, Path], **options) -> Path:
    """Render the tutorial and write it to ``path``.

    Keyword arguments are passed to ``render_markdown``.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = render_markdown(**options)
    path.write_text(text, encoding="utf-8")
    logger.debug(f"Wrote {len(text):,} characters to {path}")
    return path
