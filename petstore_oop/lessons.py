"""Tutorial lessons.

Each lesson pairs a short explanation with a runnable example. The example is
an ordinary function that prints, and ``expected_output`` is the "Output:"
block a learner will see in the tutorial. ``verify_lessons`` runs every
example and checks that the two still agree.
"""

import contextlib
import difflib
import inspect
import io
import logging
import textwrap
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

from petstore_oop.errors import InvalidPetNameError, LessonNotFoundError
from petstore_oop.pets import Animal, Bird, Cat, Dog
from petstore_oop.store import PetStore

logger = logging.getLogger(__name__)

PILLARS = ("Encapsulation", "Inheritance", "Polymorphism", "Abstraction")


@dataclass
class Lesson:
    """A single tutorial lesson."""
    number: int
    slug: str
    title: str
    explanation: str
    example: Callable[[], None]
    expected_output: List[str]
    sources: Tuple[object, ...] = ()
    tips: List[str] = field(default_factory=list)
    pillar: Optional[str] = None

    @property
    def snippet(self) -> str:
        """Body of the example function, as a learner would type it."""
        lines = inspect.getsource(self.example).splitlines()
        # Drop the ``def`` line, keep the body
        return textwrap.dedent("\n".join(lines[1:])).strip("\n")

    @property
    def source_code(self) -> str:
        """Source of the classes this lesson introduces."""
        return "\n\n".join(inspect.getsource(obj).rstrip() for obj in self.sources)

    def run(self) -> List[str]:
        """Run the example and return the printed lines."""
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            self.example()
        logger.debug(f"Ran lesson {self.number} ({self.slug})")
        return buffer.getvalue().splitlines()


@dataclass
class LessonCheck:
    """Result of comparing a lesson's real output with its Output block."""
    lesson: Lesson
    actual: List[str]
    passed: bool
    diff: str = ""


# ============================================================================
# EXAMPLES
# ============================================================================

def _classes_and_objects():
    buddy = Dog("Buddy")
    rex = Dog("Rex")
    print(buddy.name)
    print(rex.name)
    print(type(buddy).__name__)
    print(buddy is rex)


def _constructors():
    whiskers = Cat("Whiskers")
    print(whiskers.name)
    print(whiskers.describe())
    print(Cat.species)
    print(Cat("  Luna  ").name)


def _encapsulation():
    buddy = Dog("Buddy")
    buddy.name = "Max"
    print(buddy.name)
    try:
        buddy.name = ""
    except InvalidPetNameError as error:
        print(f"Rejected: {error}")
    print(buddy.name)


def _inheritance():
    buddy = Dog("Buddy")
    print(isinstance(buddy, Animal))
    print(buddy.move())
    print(buddy.fetch())
    print(Bird("Tweety").move())


def _polymorphism():
    for pet in [Dog("Buddy"), Cat("Whiskers"), Bird("Tweety")]:
        print(pet.speak())


def _abstraction():
    try:
        Animal("Generic")
    except TypeError:
        print("Animal is abstract and cannot be created directly")
    print(Cat("Whiskers").speak())


def _pet_store():
    store = PetStore()
    store.add_pet(Dog("Buddy"))
    store.add_pet(Cat("Whiskers"))
    for line in store.make_all_speak():
        print(line)


# ============================================================================
# LESSONS
# ============================================================================

LESSONS: Tuple[Lesson, ...] = (
    Lesson(
        number=1,
        slug="classes-and-objects",
        title="Classes and Objects",
        explanation=(
            "A class is a template. An object is one thing built from that "
            "template. `Dog` is the class; `buddy` and `rex` are two separate "
            "dog objects, each with its own name."
        ),
        example=_classes_and_objects,
        expected_output=["Buddy", "Rex", "Dog", "False"],
        sources=(Dog,),
        tips=[
            "Class names use CapWords (`Dog`), object names use lower_case (`buddy`).",
            "Two objects built from the same class are still different objects: `buddy is rex` is False.",
        ],
    ),
    Lesson(
        number=2,
        slug="constructors",
        title="Constructors",
        explanation=(
            "`__init__` runs every time an object is created and sets its "
            "starting values. `self` is the object being built. Values set on "
            "the class itself, like `species`, are shared by every instance."
        ),
        example=_constructors,
        expected_output=[
            "Whiskers",
            "Whiskers the Cat (Felis catus)",
            "Felis catus",
            "Luna",
        ],
        sources=(Cat,),
        tips=[
            "`Cat` has no `__init__` of its own, so Python uses the one it inherits from `Animal`.",
            "Forgetting `self` as the first parameter is the most common beginner mistake.",
        ],
    ),
    Lesson(
        number=3,
        slug="encapsulation",
        title="Encapsulation",
        pillar="Encapsulation",
        explanation=(
            "Encapsulation keeps an object's data behind methods that protect "
            "it. The name lives in `_name` (the leading underscore means "
            "\"private, please don't touch\") and is read and written through "
            "the `name` property, whose setter refuses empty names."
        ),
        example=_encapsulation,
        expected_output=[
            "Max",
            "Rejected: Pet name must be a non-empty string, got ''",
            "Max",
        ],
        sources=(Animal,),
        tips=[
            "Python has no `private` keyword. `_name` is a convention that tools and readers respect.",
            "Callers keep writing `buddy.name = ...`; the property runs the validation for them.",
        ],
    ),
    Lesson(
        number=4,
        slug="inheritance",
        title="Inheritance",
        pillar="Inheritance",
        explanation=(
            "A child class reuses everything its parent defines and adds or "
            "overrides only what is different. `Dog` adds `fetch()`; `Bird` "
            "overrides `move()` because birds fly."
        ),
        example=_inheritance,
        expected_output=[
            "True",
            "Buddy walks",
            "Buddy fetches the ball",
            "Tweety flies",
        ],
        sources=(Bird,),
        tips=[
            "`isinstance(buddy, Animal)` is True because every Dog is also an Animal.",
            "Call `super().method()` when an override should extend the parent instead of replacing it.",
        ],
    ),
    Lesson(
        number=5,
        slug="polymorphism",
        title="Polymorphism",
        pillar="Polymorphism",
        explanation=(
            "Polymorphism means one call, many behaviours. The loop calls "
            "`speak()` without knowing which animal it holds; each class "
            "answers with its own sound."
        ),
        example=_polymorphism,
        expected_output=[
            "Buddy says: Woof!",
            "Whiskers says: Meow!",
            "Tweety says: Tweet!",
        ],
        tips=[
            "Avoid `if type(pet) == Dog` chains; let each class answer for itself.",
        ],
    ),
    Lesson(
        number=6,
        slug="abstraction",
        title="Abstraction",
        pillar="Abstraction",
        explanation=(
            "`Animal` is abstract: it describes what every pet can do but "
            "leaves `make_sound()` for the children to fill in. Python refuses "
            "to create an `Animal` directly because that method has no body."
        ),
        example=_abstraction,
        expected_output=[
            "Animal is abstract and cannot be created directly",
            "Whiskers says: Meow!",
        ],
        tips=[
            "Inherit from `abc.ABC` and mark methods with `@abstractmethod`.",
            "A child that forgets to implement `make_sound()` is abstract too and cannot be created.",
        ],
    ),
    Lesson(
        number=7,
        slug="pet-store",
        title="Putting It Together: The Pet Store",
        explanation=(
            "The store keeps a list of pets and asks each one to speak, in the "
            "order they arrived. It only needs to know that every pet is an "
            "`Animal`; all four pillars are at work in these few lines."
        ),
        example=_pet_store,
        expected_output=[
            "Buddy says: Woof!",
            "Whiskers says: Meow!",
        ],
        sources=(PetStore,),
        tips=[
            "Try adding a `Bird` to the store. `PetStore` needs no changes.",
        ],
    ),
)


def get_lesson(key: Union[int, str], lessons: Sequence[Lesson] = LESSONS) -> Lesson:
    """Find a lesson by number or slug.

    Args:
        key: Lesson number (``3`` or ``"3"``) or slug (``"encapsulation"``)
        lessons: Lessons to search

    Returns:
        Lesson: The matching lesson

    Raises:
        LessonNotFoundError: If nothing matches
    """
    text = str(key).strip().lower()
    for lesson in lessons:
        if text == str(lesson.number) or text == lesson.slug:
            return lesson
    raise LessonNotFoundError(f"No lesson '{key}'. Choose 1-{len(lessons)} or a lesson slug")


def check_lesson(lesson: Lesson) -> LessonCheck:
    """Run one lesson and compare its output with the Output block."""
    try:
        actual = lesson.run()
    except Exception as e:
        actual = [f"{type(e).__name__}: {e}"]
    passed = actual == lesson.expected_output
    diff = ""
    if not passed:
        diff = "\n".join(
            difflib.unified_diff(
                lesson.expected_output,
                actual,
                fromfile="expected",
                tofile="actual",
                lineterm="",
            )
        )
        logger.warning(f"Lesson {lesson.number} ({lesson.slug}) output does not match")
    return LessonCheck(lesson=lesson, actual=actual, passed=passed, diff=diff)


def verify_lessons(lessons: Sequence[Lesson] = LESSONS) -> List[LessonCheck]:
    """Check every lesson's Output block against what its example prints."""
    return [check_lesson(lesson) for lesson in lessons]
