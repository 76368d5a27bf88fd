"""
Pytest configuration and shared fixtures for betwixt tests.
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from betwixt.cli import main


@dataclass
class DummyPerson:
    """Plain record used by the object and sequence helper tests."""

    name: Optional[str] = None
    occupation: Optional[str] = None
    age: int = 0

    def __str__(self) -> str:
        return f"{self.name} ({self.occupation})"


@pytest.fixture
def fox_sentence() -> str:
    """The classic pangram, with a second 'brown' for last-occurrence tests."""
    return "the quick brown fox jumps over the lazy brown dog"


@pytest.fixture
def sleeping_dogs() -> str:
    """Sentence used by the replacement tests."""
    return "let sleeping dogs lie"


@pytest.fixture
def people() -> list[DummyPerson]:
    """Six people, ordered as inserted."""
    return [
        DummyPerson("John", "NEET", 23),
        DummyPerson("Shelley", "Carpenter", 33),
        DummyPerson("Gars", "Heavy drinker", 43),
        DummyPerson("Linda", "Consultant", 26),
        DummyPerson("Carmela", "Social media expert", 39),
        DummyPerson("Pixie", "Middle manager", 52),
    ]


@pytest.fixture
def blank_person() -> DummyPerson:
    """A person whose optional fields are all None."""
    return DummyPerson()


@pytest.fixture
def run_cli(capsys):
    """Fixture to run the CLI and capture its exit code and output."""

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
