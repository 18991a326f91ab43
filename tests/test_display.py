from quizapp.display import (
    format_all_questions,
    format_disclaimer,
    format_main_menu,
    format_question,
    format_score,
)
from quizapp.models import Question, Quiz, Student


def _question():
    return Question("Capital?", ["one", "two", "three", "four"], "B")


def test_format_question_layout():
    text = format_question(_question(), 3)
    lines = text.splitlines()
    assert lines[0] == "Q3) Capital?"
    assert lines[1] == "A)  one"
    assert lines[4] == "D)  four"
    assert text.endswith("--------\n")


def test_format_all_questions_shows_answers():
    quiz = Quiz([_question(), Question("Other?", ["a", "b", "c", "d"], "D")])
    text = format_all_questions(quiz)
    assert "Q1) Capital?\n" in text
    assert "Q2) Other?\n" in text
    assert "Right answer is : two\n" in text
    assert "Option - D\n" in text
    assert text.endswith("#########################\n")


def test_format_disclaimer():
    text = format_disclaimer(4)
    assert "Your test contains 4 Questions" in text
    assert "Total marks : 20" in text
    assert text.startswith("**************Welcome*****************\n")


def test_format_score_passed():
    student = Student(1, "alice", 4, 20, 80.0)
    text = format_score(student, 5)
    assert "Student Name\t: alice\n" in text
    assert "Student Percentage\t: 80\n" in text
    assert "Wrong Answers\t: 1\n" in text
    assert "Total marks : 25\n" in text
    assert "Quiz Passed" in text


def test_format_score_threshold():
    passed = format_score(Student(1, "a", 7, 35, 70.0), 10)
    failed = format_score(Student(2, "b", 6, 30, 69.0), 10)
    assert "Quiz Passed" in passed
    assert "Quiz Failed" in failed


def test_format_main_menu():
    text = format_main_menu()
    assert text.startswith("Enter the option\n")
    assert "5. Exit from app\n" in text