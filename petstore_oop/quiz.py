"""Review quiz for the Pet Store tutorial.

Questions are grouped by lesson, so a learner can take the whole quiz or only
the questions for the lesson they just finished.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from petstore_oop.errors import QuizError


@dataclass
class Question:
    """Represents a single quiz question."""
    id: int
    question: str
    options: List[str]
    correct_answer: int
    explanation: str
    difficulty: str
    lesson: int

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]


@dataclass
class AnswerRecord:
    question_id: int
    user_answer: str
    correct_answer: str
    is_correct: bool


QUESTIONS: List[Question] = [
    Question(
        id=1,
        question="What is the relationship between a class and an object?",
        options=[
            "They are two names for the same thing",
            "A class is a template; an object is built from it",
            "An object is a template; a class is built from it",
            "Classes only exist while the program runs",
        ],
        correct_answer=1,
        explanation="`Dog` is the template, `Dog(\"Buddy\")` is one object made from it.",
        difficulty="Easy",
        lesson=1,
    ),
    Question(
        id=2,
        question="What does `Dog(\"Buddy\") is Dog(\"Buddy\")` evaluate to?",
        options=["True", "False", "Error", "None"],
        correct_answer=1,
        explanation="Each call creates a new object, even with the same name.",
        difficulty="Medium",
        lesson=1,
    ),
    Question(
        id=3,
        question="When does `__init__` run?",
        options=[
            "When the class is defined",
            "When a method is called",
            "Every time an object is created",
            "Only when the program exits",
        ],
        correct_answer=2,
        explanation="The constructor sets an object's starting values as it is created.",
        difficulty="Easy",
        lesson=2,
    ),
    Question(
        id=4,
        question="What does `self` refer to inside a method?",
        options=[
            "The class",
            "The current object",
            "The parent class",
            "The module",
        ],
        correct_answer=1,
        explanation="`self` is the instance the method was called on.",
        difficulty="Easy",
        lesson=2,
    ),
    Question(
        id=5,
        question="What does the leading underscore in `_name` tell other programmers?",
        options=[
            "The attribute is a constant",
            "Python will raise an error if it is read",
            "The attribute is private by convention",
            "The attribute belongs to the class",
        ],
        correct_answer=2,
        explanation="Python has no private keyword; the underscore is a convention.",
        difficulty="Medium",
        lesson=3,
    ),
    Question(
        id=6,
        question="What happens when you run `buddy.name = \"\"`?",
        options=[
            "The name becomes empty",
            "The property setter rejects it with InvalidPetNameError",
            "Python ignores the assignment",
            "A new Dog is created",
        ],
        correct_answer=1,
        explanation="The `name` setter validates every assignment, including this one.",
        difficulty="Medium",
        lesson=3,
    ),
    Question(
        id=7,
        question="What is inheritance in OOP?",
        options=[
            "Creating multiple instances",
            "Child class getting parent's properties",
            "Global variable sharing",
            "Making code shorter",
        ],
        correct_answer=1,
        explanation="Inheritance allows child classes to reuse parent class code.",
        difficulty="Easy",
        lesson=4,
    ),
    Question(
        id=8,
        question="What does `Bird(\"Tweety\").move()` return?",
        options=["Tweety walks", "Tweety flies", "Tweety says: Tweet!", "Error"],
        correct_answer=1,
        explanation="`Bird` overrides the `move()` it inherits from `Animal`.",
        difficulty="Medium",
        lesson=4,
    ),
    Question(
        id=9,
        question="A loop calls `pet.speak()` on a Dog and then a Cat. What is this an example of?",
        options=["Encapsulation", "Abstraction", "Polymorphism", "Recursion"],
        correct_answer=2,
        explanation="One call, and each class answers with its own behaviour.",
        difficulty="Easy",
        lesson=5,
    ),
    Question(
        id=10,
        question="What happens when you call `Animal(\"Generic\")`?",
        options=[
            "A generic animal is created",
            "TypeError, because Animal is abstract",
            "It returns None",
            "It creates a Dog",
        ],
        correct_answer=1,
        explanation="Classes with unimplemented abstract methods cannot be instantiated.",
        difficulty="Medium",
        lesson=6,
    ),
    Question(
        id=11,
        question="In what order does `PetStore.make_all_speak()` return lines?",
        options=[
            "Alphabetical by name",
            "Random order",
            "The order pets were added",
            "Dogs first, then cats",
        ],
        correct_answer=2,
        explanation="The store keeps a list and walks it from first to last.",
        difficulty="Easy",
        lesson=7,
    ),
    Question(
        id=12,
        question="What must change in `PetStore` to support a new `Hamster` class?",
        options=[
            "Add a new branch to make_all_speak",
            "Nothing, as long as Hamster inherits from Animal",
            "Add a hamsters list",
            "Rename the store",
        ],
        correct_answer=1,
        explanation="The store relies only on the Animal interface.",
        difficulty="Hard",
        lesson=7,
    ),
]


class Quiz:
    """Tracks answers and score for a set of questions."""

    def __init__(self, questions: Optional[Sequence[Question]] = None):
        self.questions: List[Question] = list(QUESTIONS if questions is None else questions)
        self.results: List[AnswerRecord] = []

    def for_lesson(self, lesson: int) -> "Quiz":
        """Return a new quiz restricted to one lesson's questions."""
        return Quiz([q for q in self.questions if q.lesson == lesson])

    def answer(self, question: Question, choice: int) -> bool:
        """Record an answer and return whether it was correct.

        Args:
            question: The question being answered
            choice: Zero-based index into ``question.options``
        """
        if not 0 <= choice < len(question.options):
            raise QuizError(
                f"Answer must be between 1 and {len(question.options)}, got {choice + 1}"
            )
        if question not in self.questions:
            raise QuizError(f"Question {question.id} is not part of this quiz")
        is_correct = choice == question.correct_answer
        # A repeat answer replaces the earlier one
        self.results = [r for r in self.results if r.question_id != question.id]
        self.results.append(
            AnswerRecord(
                question_id=question.id,
                user_answer=question.options[choice],
                correct_answer=question.correct_option,
                is_correct=is_correct,
            )
        )
        return is_correct

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def score(self) -> int:
        return sum(1 for r in self.results if r.is_correct)

    @property
    def percentage(self) -> float:
        return (self.score / self.total * 100) if self.total > 0 else 0.0

    def rating(self) -> str:
        percentage = self.percentage
        if percentage >= 90:
            return "Excellent! You've mastered this content."
        elif percentage >= 80:
            return "Good! You have solid understanding."
        elif percentage >= 70:
            return "Fair. Review the explanations for missed questions."
        else:
            return "Keep practicing. Review the lessons again."

    def passed(self, pass_mark: float) -> bool:
        return self.percentage >= pass_mark
