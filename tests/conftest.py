"""Pytest fixtures for course catalog tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path so the catalog modules are importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from course import Course
from course_table import CourseTable
from settings import Settings


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Silence the logger for every test unless a test opts back in."""
    monkeypatch.setenv("ENV", "test")
    return monkeypatch


@pytest.fixture
def sample_courses():
    return [
        Course(name="MATH201", title="Discrete Mathematics"),
        Course(
            name="CSCI300",
            title="Introduction to Algorithms",
            prerequisites=("CSCI200", "MATH201"),
        ),
        Course(name="CSCI101", title="Introduction to Programming in C"),
        Course(name="CSCI200", title="Data Structures", prerequisites=("CSCI101",)),
        Course(name="ENGL101", title="Composition"),
    ]


@pytest.fixture
def loaded_table(sample_courses):
    table = CourseTable()
    table.inject(sample_courses)
    return table


@pytest.fixture
def course_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text(
        "MATH201,Discrete Mathematics\n"
        "CSCI300,Introduction to Algorithms,CSCI200,MATH201\n"
        "\n"
        "CSCI101,Introduction to Programming in C\n"
        "CSCI200,Data Structures,CSCI101\n"
        "BAD,Not a course\n"
        "ENGL101,Composition\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings():
    return Settings(clear_screen=False)


@pytest.fixture
def scripted_input():
    """Build an input() replacement that replays answers, then raises EOFError."""

    def build(*answers):
        remaining = list(answers)
        prompts = []

        def fake_input(prompt=""):
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        fake_input.prompts = prompts
        return fake_input

    return build
