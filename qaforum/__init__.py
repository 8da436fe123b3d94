"""Data model of a small question-and-answer forum: questions, users, accounts, paging and search."""

__version__ = "0.1.0"
__all__ = ["accounts", "paging", "question", "search", "textlimit", "user"]