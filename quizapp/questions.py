"""Reading quiz questions from their text format."""

from __future__ import annotations

import os

from .models import OPTION_LETTERS, Question, Quiz


class QuizFileError(Exception):
    """Raised when a quiz file cannot be read or holds no questions."""


class _CharStream:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.eof = False

    def read(self) -> str | None:
        if self._pos < len(self._text):
            ch = self._text[self._pos]
            self._pos += 1
            return ch
        self.eof = True
        return None

    def unread(self) -> None:
        self._pos -= 1
        self.eof = False

    def read_line(self) -> str:
        chars = []
        while (ch := self.read()) not in ("\n", None):
            chars.append(ch)
        return "".join(chars)


def _upper(ch: str | None) -> str | None:
    if ch is not None and ch.isascii():
        return ch.upper()
    return ch


def _read_question(stream: _CharStream) -> Question | None:
    text = ""
    while True:
        if stream.read() == "Q" and stream.read() == ")":
            text += stream.read_line()
        if stream.eof:
            return None
        if text:
            break

    options = [""] * len(OPTION_LETTERS)
    right = "A"
    while True:
        key = _upper(stream.read())
        if key in OPTION_LETTERS:
            if stream.read() == ")":
                options[OPTION_LETTERS.index(key)] += stream.read_line()
        elif key == "R":
            if stream.read() == ")":
                answer = _upper(stream.read())
                if answer is not None:
                    right = answer
        if stream.eof:
            break
        if key == "Q":
            stream.unread()
            break
    return Question(text, options, right)


def parse_questions(text: str) -> list[Question]:
    """Parse every question in ``text``.

    A question starts with ``Q)``; options follow as ``A)`` to ``D)`` and the
    right option as ``R)<letter>``.
    """
    stream = _CharStream(text)
    questions = []
    while (question := _read_question(stream)) is not None:
        questions.append(question)
    return questions


def load_quiz(path: str | os.PathLike[str]) -> Quiz:
    """Load a quiz from a file, raising QuizFileError on failure."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise QuizFileError(f"cannot open {os.fspath(path)}: {exc.strerror}") from exc
    questions = parse_questions(text)
    if not questions:
        raise QuizFileError("No questions in quiz source")
    return Quiz(questions)