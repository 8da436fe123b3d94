"""Selecting and ordering questions for the question lists and search."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Iterable, Mapping

from .question import DEFAULT_DATE_TIME, Question


class SearchMode(enum.Enum):
    """What a search matches against."""

    TITLE = 0
    DATE_TIME = 1


def _date_of(questions: Mapping[int, Question], question_id: int) -> datetime:
    question = questions.get(question_id)
    return question.date_time if question is not None else DEFAULT_DATE_TIME


def sort_by_date(questions: Mapping[int, Question], ids: Iterable[int]) -> list[int]:
    """Order question ids by their date, oldest first; ties keep their order."""
    return sorted(ids, key=lambda question_id: _date_of(questions, question_id))


def search_by_title(questions: Mapping[int, Question], text: str) -> list[int]:
    """Ids of the questions whose title contains ``text``, ordered by date."""
    matches = (qid for qid, question in sorted(questions.items()) if text in question.title)
    return sort_by_date(questions, matches)


def search_by_date_range(
    questions: Mapping[int, Question], start: datetime, end: datetime
) -> list[int]:
    """Ids of the questions asked between ``start`` and ``end`` inclusive, ordered by date."""
    matches = (
        qid
        for qid, question in sorted(questions.items())
        if start <= question.date_time <= end
    )
    return sort_by_date(questions, matches)


def all_question_ids(
    owners: Mapping[int, int], questions: Mapping[int, Question]
) -> list[int]:
    """Every question id known to the owner map, ordered by date."""
    return sort_by_date(questions, sorted(owners))