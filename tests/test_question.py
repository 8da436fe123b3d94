from datetime import datetime

import pytest

from qaforum.question import (
    DEFAULT_DATE_TIME,
    Question,
    read_question_owners,
    write_question_owners,
)


def _question():
    return Question(
        info_id=7,
        user_id=3,
        date_time=datetime(2021, 3, 4, 5, 6, 7),
        content="line one\nline two",
        title="How does it work?",
    )


def test_answer_set_operations():
    question = _question()
    question.add_answer(4)
    question.add_answer(9)
    question.add_answer(4)
    assert question.answers == {4, 9}
    question.delete_answer(4)
    question.delete_answer(100)
    assert question.answers == {9}
    question.clear_answers()
    assert question.answers == set()


def test_write_then_read_round_trip(tmp_path):
    original = _question()
    original.add_answer(11)
    original.add_answer(2)
    original.write_info(tmp_path)

    loaded = Question(info_id=7)
    loaded.read_info(tmp_path)
    assert loaded.answers == {2, 11}
    assert loaded.title == original.title
    assert loaded.content == original.content
    assert loaded.date_time == original.date_time


def test_written_file_formats(tmp_path):
    question = _question()
    question.add_answer(3)
    question.add_answer(1)
    question.write_info(tmp_path)

    info = (tmp_path / "questions" / "information" / "7.txt").read_text(encoding="utf-8")
    assert info == "2021 3 4 5 6 7"

    tokens = (tmp_path / "questions" / "answerList" / "7.txt").read_text(
        encoding="utf-8"
    ).split()
    assert tokens[0] == "2"
    assert set(tokens[1:]) == {"1", "3"}


def test_empty_information_gives_default_date(tmp_path):
    _question().write_info(tmp_path)
    (tmp_path / "questions" / "information" / "7.txt").write_text("", encoding="utf-8")
    loaded = Question(info_id=7)
    loaded.read_info(tmp_path)
    assert loaded.date_time == DEFAULT_DATE_TIME


def test_read_missing_question_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Question(info_id=42).read_info(tmp_path)


def test_owner_map_round_trip(tmp_path):
    path = tmp_path / "owners.txt"
    owners = {5: 1, 2: 8, 9: 1}
    write_question_owners(path, owners)
    assert read_question_owners(path) == owners
    assert list(read_question_owners(path)) == sorted(owners)
    assert path.read_text(encoding="utf-8").splitlines()[0] == "2 8"


def test_missing_owner_file_is_empty(tmp_path):
    assert read_question_owners(tmp_path / "absent.txt") == {}