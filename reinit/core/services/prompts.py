"""
Interactive selection — single and multi choice prompts.

The orchestrator and CLI only depend on the ``Selector`` protocol;
``ClickSelector`` is the terminal implementation. Tests pass a fake.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

import click

logger = logging.getLogger(__name__)


class Selector(Protocol):
    """Presents labeled options and returns the chosen value(s)."""

    def select(self, title: str, options: Sequence[str]) -> str: ...

    def multiselect(self, title: str, options: Sequence[str]) -> list[str]: ...


def _render(title: str, options: Sequence[str]) -> None:
    click.secho(title, fg="cyan", bold=True)
    for i, option in enumerate(options, start=1):
        click.echo(f"  {i}) {option}")


def _parse_indices(raw: str, count: int) -> list[int]:
    """Parse "1, 3 2" into zero-based indices, keeping first-seen order."""
    picked: list[int] = []
    for token in raw.replace(",", " ").split():
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise click.BadParameter(f"{token!r} is not a number between 1 and {count}")
        idx = int(token) - 1
        if idx not in picked:
            picked.append(idx)
    return picked


class ClickSelector:
    """Numbered-list prompts on the terminal, via click."""

    def select(self, title: str, options: Sequence[str]) -> str:
        if not options:
            raise ValueError("select() needs at least one option")
        _render(title, options)
        choice = click.prompt(
            "Choose",
            type=click.IntRange(1, len(options)),
            default=1,
        )
        selected = options[choice - 1]
        logger.info("Selected %s", selected)
        return selected

    def multiselect(self, title: str, options: Sequence[str]) -> list[str]:
        if not options:
            return []
        _render(title, options)
        while True:
            raw = click.prompt(
                "Choose (comma-separated, empty for none)",
                default="",
                show_default=False,
            )
            try:
                indices = _parse_indices(raw, len(options))
            except click.BadParameter as e:
                click.secho(f"Error: {e.message}", fg="red", err=True)
                continue
            break
        selected = [options[i] for i in indices]
        logger.info("Selected %s", ", ".join(selected) or "(none)")
        return selected
