"""Positional-argument validation shared by CLI commands."""

from __future__ import annotations

from collections.abc import Sequence

from helm_cli.exceptions import InvalidArgumentCountError


def check_args_length(expected: int, actual: int, *required_args: str) -> None:
    """Raise :class:`InvalidArgumentCountError` unless *actual* equals *expected*.

    *required_args* are human labels (e.g. ``"chart name"``) quoted in
    the error message.
    """
    if actual != expected:
        raise InvalidArgumentCountError(expected, actual, required_args)


def chart_reference_from_args(args: Sequence[str]) -> str:
    """Return the single chart reference in *args*."""
    check_args_length(1, len(args), "chart name")
    return args[0]
