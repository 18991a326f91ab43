# quizapp

A console quiz runner. It loads multiple-choice questions from a plain text
file, lets students register, runs each registered student through the quiz
one key press at a time, and reports their scores.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running

    quizapp [QUIZ] [--hide-answers]

`QUIZ` is the quiz name; `.txt` is appended and the file is opened relative to
the current directory, so `quizapp science` loads `science.txt`. Without a
name you are asked for one.

After loading, the file name, the number of questions and every question with
its right answer are printed. `--hide-answers` leaves that listing out.

If the file cannot be opened or holds no questions, an error is printed and
the command exits with status 1.

## Quiz file format

A question starts with `Q)`; the rest of that line is the question text. It is
followed by up to four options `A)` to `D)` and the right answer `R)`:

    Q)What is the boiling point of water at sea level?
    A)90 C
    B)100 C
    C)110 C
    D)120 C
    R)B

Option and answer letters may be written in lower case. An option that is
missing is left empty, and if `R)` is missing the right answer is `A`.

## Main menu

    1. Student register
    2. Start Exam
    3. Want to see my score
    4. Print all students list
    5. Exit from app

Only the first character of what you type is used. Students get roll numbers
1, 2, 3, ... in the order they register, and each student may take the exam
once. Option 3 shows the score of a student who has taken the exam; option 4
prints a score card for every registered student. The program also ends at
the end of input.

## During the exam

Keys are read one at a time without pressing Enter when the input is a
terminal; otherwise characters are read from standard input in turn.

- `N` moves to the next question, `P` to the previous one.
- `A`, `B`, `C` or `D` answers the current question; answering again replaces
  the earlier answer.
- `Q` ends the exam and shows the score.
- Any other key is ignored. Lower-case letters count as upper case.

Each correct answer is worth 5 marks. The percentage is a whole number, rounded
down, and a student passes with 70% or more.

## Using it as a library

    from quizapp.questions import load_quiz, parse_questions, QuizFileError
    from quizapp.models import Student, Question, Quiz
    from quizapp.session import QuizSession, run_quiz, calculate_result, random_order
    from quizapp.display import format_question, format_score

- `load_quiz(path)` returns a `Quiz` and raises `QuizFileError` when the file
  cannot be read or holds no questions; `parse_questions(text)` returns the
  list of `Question` objects found in a string.
- `QuizSession(student, quiz)` drives one exam: `start()` returns the opening
  text and `press(key)` handles one key and returns the text to show. After
  `Q`, `finished` is true and the result is stored on the `Student`.
- `run_quiz(student, quiz, read_key, out)` runs a whole exam with a key-reading
  function and an output stream.
- `calculate_result(student, answers)` scores a list of right/wrong flags.
- `random_order(count, rng)` returns the indexes `0..count-1` shuffled.
- `quizapp.cli.StudentRegistry` keeps the registered students.

## Limitations

Students and their results live only in memory for the life of one run; nothing
is saved. Questions are always asked in the order they appear in the file.