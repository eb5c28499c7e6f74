"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from reinit.core.models.config import ReinitConfig


class FakeSelector:
    """Scripted stand-in for the interactive prompts.

    ``answers`` feed ``select`` in order; when they run out the first
    option is picked. Every call is recorded.
    """

    def __init__(self, answers: Sequence[str] = (), multi: Sequence[str] = ()):
        self.answers = list(answers)
        self.multi = list(multi)
        self.calls: list[tuple[str, list[str]]] = []

    def select(self, title: str, options: Sequence[str]) -> str:
        self.calls.append((title, list(options)))
        if self.answers:
            return self.answers.pop(0)
        return options[0]

    def multiselect(self, title: str, options: Sequence[str]) -> list[str]:
        self.calls.append((title, list(options)))
        return list(self.multi)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def make_selector():
    """Factory for FakeSelector instances."""
    return FakeSelector


@pytest.fixture
def selector() -> FakeSelector:
    return FakeSelector()


@pytest.fixture
def config() -> ReinitConfig:
    """Config with built-in defaults and no hooks (never read from disk)."""
    return ReinitConfig()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test with cwd set to an empty temp directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work
