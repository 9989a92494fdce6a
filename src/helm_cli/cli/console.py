"""Stderr console and logging helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is not installed.  Nothing here writes to stdout;
stdout is reserved for rendered releases.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from helm_cli.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def escape_markup(text: object) -> str:
    """Escape Rich markup in *text* so square brackets print literally.

    Without Rich the proxy prints plain text, so nothing needs escaping.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(text)
    return escape(str(text))


def configure_logging(verbose: bool = False) -> logging.Handler:
    """Attach a stderr handler to the ``helm_cli`` logger.

    ``DEBUG`` when *verbose*, ``WARNING`` otherwise.  Any handler left by
    a previous call is replaced, so repeated invocations in one process
    do not duplicate output.
    """
    handler: logging.Handler
    try:
        from rich.logging import RichHandler

        handler = RichHandler(
            console=get_rich_console(),
            show_path=False,
            markup=False,
        )
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    package_logger = logging.getLogger("helm_cli")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return handler
