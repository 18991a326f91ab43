"""Interactive command-line front end."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from .display import format_all_questions, format_main_menu, format_score
from .models import Quiz, Student
from .questions import QuizFileError, load_quiz
from .session import run_quiz


class StudentRegistry:
    """Registered students, numbered from 1 in registration order."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def register(self, name: str) -> Student:
        student = Student(len(self._students) + 1, name)
        self._students.append(student)
        return student

    def exists(self, student_id: int) -> bool:
        return 1 <= student_id <= len(self._students)

    def attended(self, student_id: int) -> bool:
        return self.get(student_id).has_attended()

    def get(self, student_id: int) -> Student:
        if not self.exists(student_id):
            raise KeyError(student_id)
        return self._students[student_id - 1]


def read_key() -> str:
    """Read one key press without echo; raise EOFError at end of input."""
    stream = sys.stdin
    if not stream.isatty():
        ch = stream.read(1)
    elif sys.platform == "win32":
        import msvcrt

        ch = msvcrt.getwch()
    else:
        import termios
        import tty

        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = stream.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if not ch:
        raise EOFError
    return ch


def _read_token() -> str:
    while True:
        line = sys.stdin.readline()
        if not line:
            raise EOFError
        words = line.split()
        if words:
            return words[0]


def _prompt_token(prompt: str) -> str:
    print(prompt, end="", flush=True)
    return _read_token()


def _read_student_id(registry: StudentRegistry) -> int:
    entered = _prompt_token("Enter student Id : ")
    print(f"Existed students count : {len(registry)}")
    try:
        return int(entered)
    except ValueError:
        return 0


def _register(registry: StudentRegistry) -> None:
    student = registry.register(_prompt_token("Enter name : "))
    print(f"your roll no is : {student.student_id}")


def _start_exam(registry: StudentRegistry, quiz: Quiz) -> None:
    student_id = _read_student_id(registry)
    if not registry.exists(student_id):
        print("Student not existed-----------------X")
    elif registry.attended(student_id):
        print("Student already attend exam-----------------X")
    else:
        run_quiz(registry.get(student_id), quiz, read_key, sys.stdout)


def _show_score(registry: StudentRegistry, quiz: Quiz) -> None:
    student_id = _read_student_id(registry)
    if not registry.exists(student_id):
        print("Student not existed-----------------X")
    elif registry.attended(student_id):
        print(format_score(registry.get(student_id), quiz.question_count), end="")
    else:
        print("Student not attended exam-----------------X")


def _list_students(registry: StudentRegistry, quiz: Quiz) -> None:
    if not len(registry):
        print("No student attended to test-----------------X")
        return
    for student in registry:
        print(format_score(student, quiz.question_count), end="")
        print("--------------")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="quizapp", description="Run a multiple-choice quiz.")
    parser.add_argument("quiz", nargs="?", help="quiz name; '.txt' is appended")
    parser.add_argument(
        "--hide-answers",
        action="store_true",
        help="do not list the questions and answers after loading",
    )
    args = parser.parse_args(argv)

    try:
        name = args.quiz or _prompt_token("Enter the quiz name : ")
    except EOFError:
        return 1
    file_name = name + ".txt"
    if not args.hide_answers:
        print(f"filename : {file_name}")
    try:
        quiz = load_quiz(file_name)
    except QuizFileError as exc:
        print(exc, file=sys.stderr)
        print("Failed to prepare questions ; ")
        return 1
    if not args.hide_answers:
        print(f"quesCount = {quiz.question_count}")
        print(format_all_questions(quiz), end="")

    registry = StudentRegistry()
    actions = {
        "1": lambda: _register(registry),
        "2": lambda: _start_exam(registry, quiz),
        "3": lambda: _show_score(registry, quiz),
        "4": lambda: _list_students(registry, quiz),
    }
    while True:
        print(format_main_menu(), end="", flush=True)
        try:
            option = _read_token()[0]
            if option == "5":
                break
            action = actions.get(option)
            if action is None:
                print("Invalid option-----------------X")
            else:
                action()
        except EOFError:
            break
    print("Program closed")
    return 0