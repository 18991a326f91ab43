import io

import pytest

from quizapp.cli import StudentRegistry, main, read_key

QUIZ_TEXT = "Q)Pick two?\nA)one\nB)two\nC)three\nD)four\nR)B\n"


@pytest.fixture
def quiz_name(tmp_path):
    (tmp_path / "exam.txt").write_text(QUIZ_TEXT, encoding="utf-8")
    return str(tmp_path / "exam")


def run_main(monkeypatch, argv, stdin_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    return main(argv)


def test_registry_numbers_students():
    registry = StudentRegistry()
    first = registry.register("alice")
    second = registry.register("bob")
    assert (first.student_id, second.student_id) == (1, 2)
    assert len(registry) == 2
    assert registry.get(2).name == "bob"


def test_registry_exists_bounds():
    registry = StudentRegistry()
    assert registry.exists(1) is False
    registry.register("alice")
    assert registry.exists(1) is True
    assert registry.exists(0) is False
    assert registry.exists(2) is False


def test_registry_attended():
    registry = StudentRegistry()
    student = registry.register("alice")
    assert registry.attended(1) is False
    student.correct_answers = 0
    assert registry.attended(1) is True


def test_registry_get_unknown():
    with pytest.raises(KeyError):
        StudentRegistry().get(1)


def test_read_key_from_pipe(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("BQ"))
    assert read_key() == "B"
    assert read_key() == "Q"
    with pytest.raises(EOFError):
        read_key()


def test_full_session(monkeypatch, capsys, quiz_name):
    code = run_main(monkeypatch, [quiz_name], "1\nbob\n2\n1\nBQ\n3\n1\n4\n5\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "your roll no is : 1" in out
    assert "U choosed -> two" in out
    assert out.count("Quiz Passed") == 3
    assert out.rstrip().endswith("Program closed")


def test_exam_only_once(monkeypatch, capsys, quiz_name):
    run_main(monkeypatch, [quiz_name, "--hide-answers"], "1\nbob\n2\n1\nQ\n2\n1\n5\n")
    out = capsys.readouterr().out
    assert "Student already attend exam" in out
    assert "Right answer is" not in out


def test_unknown_student(monkeypatch, capsys, quiz_name):
    run_main(monkeypatch, [quiz_name], "2\n7\n3\n1\n5\n")
    out = capsys.readouterr().out
    assert out.count("Student not existed") == 2


def test_score_before_exam(monkeypatch, capsys, quiz_name):
    run_main(monkeypatch, [quiz_name], "1\nbob\n3\n1\n5\n")
    assert "Student not attended exam" in capsys.readouterr().out


def test_list_without_students(monkeypatch, capsys, quiz_name):
    run_main(monkeypatch, [quiz_name], "4\n5\n")
    assert "No student attended to test" in capsys.readouterr().out


def test_invalid_option_and_eof(monkeypatch, capsys, quiz_name):
    code = run_main(monkeypatch, [quiz_name], "9\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "Invalid option" in out
    assert "Program closed" in out


def test_quiz_name_prompted(monkeypatch, capsys, quiz_name):
    code = run_main(monkeypatch, [], f"{quiz_name}\n5\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "Enter the quiz name : " in out
    assert "Q1) Pick two?" in out


def test_missing_quiz_file(monkeypatch, capsys, tmp_path):
    code = run_main(monkeypatch, [str(tmp_path / "absent")], "")
    captured = capsys.readouterr()
    assert code == 1
    assert "Failed to prepare questions" in captured.out