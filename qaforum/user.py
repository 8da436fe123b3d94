"""Users, their relations, and the name and password maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, Mapping


@dataclass
class User:
    """A registered user; gender is 0 for male, 1 for female, 2 for unknown."""

    user_name: str = ""
    user_id: int = 0
    birthday: date | None = None
    gender: int = 2
    introduction: str = ""
    fans: set[int] = field(default_factory=set)
    following_users: set[int] = field(default_factory=set)
    following_questions: set[int] = field(default_factory=set)
    questions: set[int] = field(default_factory=set)
    answers: set[int] = field(default_factory=set)

    def add_fan(self, user_id: int) -> None:
        self.fans.add(user_id)

    def remove_fan(self, user_id: int) -> None:
        self.fans.discard(user_id)

    def follow_user(self, user_id: int) -> None:
        self.following_users.add(user_id)

    def unfollow_user(self, user_id: int) -> None:
        self.following_users.discard(user_id)

    def follow_question(self, question_id: int) -> None:
        self.following_questions.add(question_id)

    def unfollow_question(self, question_id: int) -> None:
        self.following_questions.discard(question_id)

    def add_question(self, question_id: int) -> None:
        self.questions.add(question_id)

    def add_answer(self, answer_id: int) -> None:
        self.answers.add(answer_id)

    def is_followed_by(self, user_id: int) -> bool:
        return user_id in self.fans

    def is_following_question(self, question_id: int) -> bool:
        return question_id in self.following_questions

    def praise_total(self, praise_counts: Mapping[int, int]) -> int:
        """Sum of the praise counts of this user's answers."""
        return sum(praise_counts.get(answer_id, 0) for answer_id in self.answers)

    def answer_for_question(
        self, answer_to_question: Mapping[int, int], question_id: int
    ) -> int | None:
        """The id of this user's answer to ``question_id``, or None."""
        return next(
            (
                answer_id
                for answer_id in sorted(self.answers)
                if answer_to_question.get(answer_id) == question_id
            ),
            None,
        )


def _read_tokens(path) -> list[str]:
    path = Path(path)
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").split()


def read_name_to_id(path) -> dict[str, int]:
    """Read the user-name to id map; a missing file gives an empty map."""
    tokens = iter(_read_tokens(path))
    return {name: int(user_id) for name, user_id in zip(tokens, tokens)}


def write_name_to_id(path, name_to_id: Mapping[str, int]) -> None:
    lines = "".join(f"{name} {user_id}\n" for name, user_id in sorted(name_to_id.items()))
    Path(path).write_text(lines, encoding="utf-8")


def read_passwords(path) -> dict[int, str]:
    """Read the user-id to password-digest map; a missing file gives an empty map."""
    tokens = iter(_read_tokens(path))
    return {int(user_id): digest for user_id, digest in zip(tokens, tokens)}


def write_passwords(path, passwords: Mapping[int, str]) -> None:
    lines = "".join(f"{user_id} {digest}\n" for user_id, digest in sorted(passwords.items()))
    Path(path).write_text(lines, encoding="utf-8")


def check_user_password(
    user_name: str,
    password: str,
    name_to_id: Mapping[str, int],
    passwords: Mapping[int, str],
    digest: Callable[[str], str],
) -> bool:
    """True if ``user_name`` exists and its stored digest matches ``password``."""
    if user_name not in name_to_id:
        return False
    return passwords.get(name_to_id[user_name], "") == digest(password)