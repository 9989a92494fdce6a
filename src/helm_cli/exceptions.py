"""Custom exception hierarchy for helm-cli.

All exceptions that cross layer boundaries must inherit from
:class:`HelmError`.  Raw transport exceptions (e.g. from httpx) must
NEVER propagate beyond the infrastructure layer — they are caught there
and re-raised as a typed subclass defined here.

Hierarchy
---------
HelmError
├── InvalidArgumentCountError
├── ChartNotFoundError
├── RemoteInstallError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations

import re
from collections.abc import Sequence


class HelmError(Exception):
    """Base exception for all helm-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class InvalidArgumentCountError(HelmError):
    """Raised when a command receives the wrong number of positional args."""

    def __init__(
        self,
        expected: int,
        actual: int,
        required_args: Sequence[str] = (),
    ) -> None:
        noun = "argument" if expected == 1 else "arguments"
        super().__init__(
            f"This command needs {expected} {noun}: {', '.join(required_args)}",
        )
        self.expected: int = expected
        self.actual: int = actual
        self.required_args: tuple[str, ...] = tuple(required_args)


# --- Chart loading ---------------------------------------------------------

class ChartNotFoundError(HelmError):
    """Raised when the chart reference does not point at a chart."""


# --- Remote install --------------------------------------------------------

class RemoteInstallError(HelmError):
    """Raised when the install request to the server fails."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(HelmError):
    """Raised when a ``HELM_*`` environment setting is invalid."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(HelmError):
    """Raised when a required runtime dependency is not available."""


_RPC_PREFIX = re.compile(r"^rpc error: code = \S+ desc = ")


def pretty_error(message: str) -> str:
    """Strip RPC framing from a server error message.

    ``rpc error: code = Unknown desc = chart not found`` becomes
    ``chart not found``.  Messages without the framing are returned
    verbatim.
    """
    return _RPC_PREFIX.sub("", message.strip())
