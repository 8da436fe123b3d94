"""Account registration and the persistent id counters."""

from __future__ import annotations

import configparser
import hashlib
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, MutableMapping

from .user import check_user_password

_ALNUM_6_TO_18 = re.compile(r"[a-zA-Z0-9]{6,18}")
_SECTION = "General"
_USER_KEY = "userIDCnt"
_ANSWER_KEY = "answerIDCnt"
_QUESTION_KEY = "questionIDCnt"


def md5_digest(text: str) -> str:
    """Hex MD5 digest of ``text`` encoded as UTF-8."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


class RegistrationError(ValueError):
    """Raised when a sign-up is refused; ``field`` names the offending input."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


def validate_password(password: str) -> bool:
    """True if the password is 6 to 18 ASCII letters and digits."""
    return _ALNUM_6_TO_18.fullmatch(password) is not None


@dataclass
class Counters:
    """The next free ids for users, answers and questions."""

    user_id: int = 0
    answer_id: int = 0
    question_id: int = 0


def _parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # keep key case as stored
    return parser


def load_counters(path) -> Counters:
    """Read the counters from an INI settings file; missing values default to 0."""
    parser = _parser()
    path = Path(path)
    if path.exists():
        parser.read(path, encoding="utf-8")
    if not parser.has_section(_SECTION):
        return Counters()
    section = parser[_SECTION]
    return Counters(
        user_id=section.getint(_USER_KEY, fallback=0),
        answer_id=section.getint(_ANSWER_KEY, fallback=0),
        question_id=section.getint(_QUESTION_KEY, fallback=0),
    )


def save_counters(path, counters: Counters) -> None:
    """Write the counters to an INI settings file, keeping its other entries."""
    path = Path(path)
    parser = _parser()
    if path.exists():
        parser.read(path, encoding="utf-8")
    if not parser.has_section(_SECTION):
        parser.add_section(_SECTION)
    section = parser[_SECTION]
    section[_USER_KEY] = str(counters.user_id)
    section[_ANSWER_KEY] = str(counters.answer_id)
    section[_QUESTION_KEY] = str(counters.question_id)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        parser.write(handle)


class AccountStore:
    """User names, password digests and the user-id counter."""

    def __init__(
        self,
        name_to_id: MutableMapping[str, int] | None = None,
        passwords: MutableMapping[int, str] | None = None,
        counters: Counters | None = None,
        digest: Callable[[str], str] = md5_digest,
        settings_path=None,
    ):
        self.name_to_id = name_to_id if name_to_id is not None else {}
        self.passwords = passwords if passwords is not None else {}
        self.counters = counters if counters is not None else Counters()
        self.digest = digest
        self.settings_path = settings_path

    def register(self, user_name: str, password: str, password_again: str) -> int:
        """Create an account and return its new user id."""
        name = user_name.strip()
        if not name:
            raise RegistrationError("user_name", "user name must not be empty")
        if name in self.name_to_id:
            raise RegistrationError("user_name", f"user name {name!r} is already taken")
        cleaned = password.strip()
        if not validate_password(cleaned):
            raise RegistrationError(
                "password", "password must be 6 to 18 letters and digits"
            )
        if cleaned != password_again.strip():
            raise RegistrationError("password_again", "passwords do not match")

        user_id = self.counters.user_id
        self.name_to_id[name] = user_id
        self.passwords[user_id] = self.digest(cleaned)
        self.counters.user_id += 1
        if self.settings_path is not None:
            save_counters(self.settings_path, self.counters)
        return user_id

    def check(self, user_name: str, password: str) -> bool:
        """True if the user exists and the password matches."""
        return check_user_password(
            user_name, password, self.name_to_id, self.passwords, self.digest
        )