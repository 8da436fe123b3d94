"""Questions and their on-disk storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Mapping

DEFAULT_DATE_TIME = datetime(2000, 1, 1, 12, 0, 0)

_ANSWER_LIST = "answerList"
_TITLE = "title"
_DETAIL = "detail"
_INFORMATION = "information"


def _question_file(data_dir, kind: str, info_id: int) -> Path:
    return Path(data_dir) / "questions" / kind / f"{info_id}.txt"


def _read_int_pairs(path) -> dict[int, int]:
    path = Path(path)
    if not path.exists():
        return {}
    tokens = iter(path.read_text(encoding="utf-8").split())
    return {int(key): int(value) for key, value in zip(tokens, tokens)}


@dataclass
class Question:
    """A question asked by a user, with the ids of the answers it received."""

    info_id: int = 0
    user_id: int = 0
    date_time: datetime = DEFAULT_DATE_TIME
    content: str = ""
    title: str = ""
    answers: set[int] = field(default_factory=set)

    def add_answer(self, answer_id: int) -> None:
        self.answers.add(answer_id)

    def delete_answer(self, answer_id: int) -> None:
        self.answers.discard(answer_id)

    def clear_answers(self) -> None:
        self.answers.clear()

    def read_info(self, data_dir) -> None:
        """Load answers, title, detail and date of this question from ``data_dir``."""
        tokens = _question_file(data_dir, _ANSWER_LIST, self.info_id).read_text(
            encoding="utf-8"
        ).split()
        if tokens:
            amount = int(tokens[0])
            self.answers = {int(tok) for tok in tokens[1 : 1 + amount]}
        else:
            self.answers = set()

        self.title = _question_file(data_dir, _TITLE, self.info_id).read_text(
            encoding="utf-8"
        )
        self.content = _question_file(data_dir, _DETAIL, self.info_id).read_text(
            encoding="utf-8"
        )

        parts = [
            DEFAULT_DATE_TIME.year,
            DEFAULT_DATE_TIME.month,
            DEFAULT_DATE_TIME.day,
            DEFAULT_DATE_TIME.hour,
            DEFAULT_DATE_TIME.minute,
            DEFAULT_DATE_TIME.second,
        ]
        info_tokens = _question_file(data_dir, _INFORMATION, self.info_id).read_text(
            encoding="utf-8"
        ).split()
        for index, tok in enumerate(info_tokens[:6]):
            parts[index] = int(tok)
        self.date_time = datetime(*parts)

    def write_info(self, data_dir) -> None:
        """Store answers, title, detail and date of this question under ``data_dir``."""
        for kind in (_ANSWER_LIST, _TITLE, _DETAIL, _INFORMATION):
            _question_file(data_dir, kind, self.info_id).parent.mkdir(
                parents=True, exist_ok=True
            )

        answer_line = "".join(f"{answer_id} " for answer_id in sorted(self.answers))
        _question_file(data_dir, _ANSWER_LIST, self.info_id).write_text(
            f"{len(self.answers)}\n{answer_line}\n", encoding="utf-8"
        )
        _question_file(data_dir, _TITLE, self.info_id).write_text(
            self.title, encoding="utf-8"
        )
        _question_file(data_dir, _DETAIL, self.info_id).write_text(
            self.content, encoding="utf-8"
        )
        moment = self.date_time
        _question_file(data_dir, _INFORMATION, self.info_id).write_text(
            f"{moment.year} {moment.month} {moment.day} "
            f"{moment.hour} {moment.minute} {moment.second}",
            encoding="utf-8",
        )


def read_question_owners(path) -> dict[int, int]:
    """Read the question-id to asker-id map; a missing file gives an empty map."""
    return dict(sorted(_read_int_pairs(path).items()))


def write_question_owners(path, owners: Mapping[int, int]) -> None:
    """Write the question-id to asker-id map, one pair per line, ordered by id."""
    lines = "".join(f"{key} {value}\n" for key, value in sorted(owners.items()))
    Path(path).write_text(lines, encoding="utf-8")