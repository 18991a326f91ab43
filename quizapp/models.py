"""Data types shared by the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field

NO_OF_CHOICE = 4
OPTION_LETTERS = ("A", "B", "C", "D")
MARKS_PER_QUESTION = 5
PASS_PERCENTAGE = 70


@dataclass
class Student:
    """A registered student and, once the exam is taken, their result."""

    student_id: int
    name: str
    correct_answers: int = -1
    marks: int = -1
    percentage: float = 0.0

    def has_attended(self) -> bool:
        """Return True once the student has finished an exam."""
        return self.correct_answers != -1


@dataclass
class Question:
    """A multiple-choice question with four options."""

    text: str = ""
    options: list[str] = field(default_factory=lambda: [""] * NO_OF_CHOICE)
    right_option: str = "A"

    def option(self, letter: str) -> str:
        """Return the text of the option labelled by ``letter``."""
        return self.options[OPTION_LETTERS.index(letter)]

    @property
    def right_answer(self) -> str:
        """Text of the right option, or an empty string if the label is invalid."""
        if self.right_option in OPTION_LETTERS:
            return self.option(self.right_option)
        return ""


@dataclass
class Quiz:
    """The questions of a quiz and the right/wrong state of each answer."""

    questions: list[Question] = field(default_factory=list)
    answers: list[bool] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.reset_answers()

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def reset_answers(self) -> None:
        """Mark every question as not answered correctly."""
        self.answers = [False] * len(self.questions)