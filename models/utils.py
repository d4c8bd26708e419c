"""Utility functions for Hue CLI.

This module contains helper functions used across the command modules:
- CliState / get_state: Per-invocation config handed to every command
- report_errors: Turn core exceptions into operator output and exit codes
- similarity_score: Fuzzy string matching for command typo suggestions
"""

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import click

from core.errors import FatalError, RecoverableError
from models.types import Config


@dataclass
class CliState:
    """Configuration loaded once at start-up, shared by all commands."""
    config: Config
    config_path: str | Path | None = None


def get_state() -> CliState:
    """Return the CliState stored on the current click context."""
    return click.get_current_context().find_object(CliState)


@contextmanager
def report_errors():
    """Report core errors the way the CLI promises.

    Recoverable errors are printed and the command ends normally; fatal
    errors abort with a non-zero exit status.
    """
    try:
        yield
    except RecoverableError as e:
        click.echo(str(e))
    except FatalError as e:
        raise click.ClickException(str(e)) from e


def similarity_score(typed: str, name: str) -> int:
    """Rank how closely a typed command resembles a known command name.

    Scores are 100 for a case-insensitive match, 80 when one is a prefix of
    the other, 60 when one contains the other, and otherwise up to 50 for
    the share of typed characters found in order. Anything at or below 20
    counts as no match and scores 0.
    """
    typed, name = typed.lower(), name.lower()

    if typed == name:
        return 100
    if typed.startswith(name) or name.startswith(typed):
        return 80
    if typed in name or name in typed:
        return 60

    # Each membership test consumes the iterator, so order is kept
    remaining = iter(name)
    matched = sum(1 for char in typed if char in remaining)
    score = matched * 50 // max(len(typed), len(name))
    return score if score > 20 else 0
