"""Text shown to the user."""

from __future__ import annotations

from .models import MARKS_PER_QUESTION, OPTION_LETTERS, PASS_PERCENTAGE, Question, Quiz, Student


def _options(question: Question) -> str:
    return "".join(
        f"{letter})  {text}\n" for letter, text in zip(OPTION_LETTERS, question.options)
    )


def format_all_questions(quiz: Quiz) -> str:
    """Every question with its options and right answer."""
    parts = []
    for number, question in enumerate(quiz.questions, start=1):
        parts.append(f"Q{number}) {question.text}\n")
        parts.append(_options(question))
        parts.append(f"Right answer is : {question.right_answer}\n")
        parts.append(f"Option - {question.right_option}\n\n")
        parts.append("^^^^^^^^^^^^^^^^^^^^^^^\n")
    parts.append("#########################\n")
    return "".join(parts)


def format_question(question: Question, number: int) -> str:
    """A single question as shown during the exam."""
    return f"Q{number}) {question.text}\n{_options(question)}--------\n"


def format_disclaimer(question_count: int) -> str:
    """The rules shown before the exam starts."""
    return (
        "**************Welcome*****************\n"
        f"\t\tYour test contains {question_count} Questions\n"
        f"\t\tTotal marks : {question_count * MARKS_PER_QUESTION}\n"
        f"\t\tPass percentage is {PASS_PERCENTAGE}%\n"
        "\t\tClick 'P' to go to previous question\n"
        "\t\tClick 'N' to go to next question\n"
        "\t\tIf u click 'Q' it will close\n"
        "\t\tIf u click anything other then 'A' , 'B' , 'C' , 'D' it is not valid input , "
        "it will ignore that key\n"
        "\t\tYou can start now\n"
        "**************************************\n"
    )


def format_score(student: Student, total_count: int) -> str:
    """The score card of a student."""
    verdict = "Quiz Passed" if student.percentage >= PASS_PERCENTAGE else "Quiz Failed"
    return (
        "\n********score*******\n"
        f"Student Id\t: {student.student_id}\n"
        f"Student Name\t: {student.name}\n"
        f"Total questions count\t: {total_count}\n"
        f"Total marks : {total_count * MARKS_PER_QUESTION}\n"
        f"Correct Answers\t: {student.correct_answers}\n"
        f"Wrong Answers\t: {total_count - student.correct_answers}\n"
        f"Student total Marks\t: {student.marks}\n"
        f"Student Percentage\t: {student.percentage:g}\n"
        f"{verdict}\n"
        "\n********   ***   *******\n"
    )


def format_main_menu() -> str:
    """The main menu."""
    return (
        "Enter the option\n"
        "1. Student register\n"
        "2. Start Exam\n"
        "3. Want to see my score\n"
        "4. Print all students list\n"
        "5. Exit from app\n"
    )