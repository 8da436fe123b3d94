[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qaforum"
version = "0.1.0"
description = "Data model of a small question-and-answer forum: questions, users, accounts, paging and search."
requires-python = ">=3.10"
dependencies = []
keywords = ["forum", "questions", "answers", "community", "pagination"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Groupware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qaforum"]

[tool.pytest.ini_options]
addopts = "-ra"
