"""Running an exam: key handling, navigation and scoring."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import TextIO

from .display import format_disclaimer, format_question, format_score
from .models import MARKS_PER_QUESTION, OPTION_LETTERS, Quiz, Student

_FIRST_MESSAGE = (
    "This is first question in list no prev question stop pressing 'P' , "
    "press 'N' and go furthur"
)
_LAST_MESSAGE = (
    "This is last question in list no next question stop pressing 'N' , "
    "press 'P' and go back"
)


def calculate_result(student: Student, answers: Sequence[bool]) -> Student:
    """Store the number of right answers, marks and percentage on ``student``."""
    if not answers:
        raise ValueError("no answers to score")
    correct = sum(1 for answer in answers if answer)
    student.correct_answers = correct
    student.marks = correct * MARKS_PER_QUESTION
    student.percentage = float(student.marks * 100 // (len(answers) * MARKS_PER_QUESTION))
    return student


def random_order(count: int, rng: random.Random | None = None) -> list[int]:
    """Return the question indexes ``0..count-1`` in random order."""
    return (rng or random).sample(range(count), count)


class QuizSession:
    """One student's pass through a quiz, driven one key at a time."""

    def __init__(self, student: Student, quiz: Quiz) -> None:
        if not quiz.questions:
            raise ValueError("quiz has no questions")
        self.student = student
        self.quiz = quiz
        self.index = 0
        self.finished = False
        self._started = False

    def start(self) -> str:
        """Reset the exam state and return the opening text."""
        self.student.marks = 0
        self.quiz.reset_answers()
        self.index = 0
        self.finished = False
        self._started = True
        return format_disclaimer(self.quiz.question_count) + format_question(
            self.quiz.questions[0], 1
        )

    def press(self, key: str) -> str:
        """Handle one key and return the text to show."""
        if len(key) != 1:
            raise ValueError(f"expected a single key, got {key!r}")
        if not self._started:
            raise RuntimeError("session has not been started")
        if self.finished:
            raise RuntimeError("session is already finished")

        key = key.upper() if key.isascii() else key
        question = self.quiz.questions[self.index]
        parts = []
        action = key
        echo = True

        if key == "P":
            if self.index > 0:
                self.index -= 1
            else:
                action = ""
                echo = False
                parts.append("\r" + _FIRST_MESSAGE)
        elif key == "N":
            if self.index < self.quiz.question_count - 1:
                self.index += 1
            else:
                action = ""
                echo = False
                parts.append("\r" + _LAST_MESSAGE)
        elif key in OPTION_LETTERS:
            self.quiz.answers[self.index] = key == question.right_option
        elif key != "Q":
            echo = False

        if echo:
            parts.append(key + "\n")

        if key == "Q":
            parts.append("Test closed\n")
            calculate_result(self.student, self.quiz.answers)
            parts.append(format_score(self.student, self.quiz.question_count))
            self.finished = True
        elif action in ("N", "P"):
            parts.append(format_question(self.quiz.questions[self.index], self.index + 1))
        elif action in OPTION_LETTERS:
            parts.append(f"U choosed -> {question.option(action)}\n")
        return "".join(parts)


def run_quiz(
    student: Student, quiz: Quiz, read_key: Callable[[], str], out: TextIO
) -> Student:
    """Run a whole exam, reading keys from ``read_key`` and writing to ``out``."""
    session = QuizSession(student, quiz)
    out.write(session.start())
    out.flush()
    while not session.finished:
        out.write(session.press(read_key()))
        out.flush()
    return student