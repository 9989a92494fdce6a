"""CLI application entry point and command routing for helm-cli.

This module is the **sole error boundary** for the application.  It
catches :class:`~helm_cli.exceptions.HelmError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a message on stderr and
returns a well-defined exit code.

Architecture notes
------------------
* No business logic lives here — validation, endpoint resolution and
  dispatch are delegated to the core layer, transport to ``infra``.
* Releases are written to stdout by :mod:`helm_cli.cli.render`;
  diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys

from helm_cli.cli import exit_codes
from helm_cli.cli.console import configure_logging, console, escape_markup
from helm_cli.core.endpoint import DEFAULT_HOST, HOST_ENV_VAR
from helm_cli.exceptions import HelmError
from helm_cli.version import __version__

logger = logging.getLogger(__name__)

INSTALL_DESCRIPTION = """\
This command installs a chart archive.

The install argument must be either a relative
path to a chart directory or the name of a
chart in the current working directory.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser and its ``install`` sub-command."""
    parser = argparse.ArgumentParser(
        prog="helm",
        description="Install charts through a Tiller server.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command")
    install = subparsers.add_parser(
        "install",
        usage="%(prog)s [CHART]",
        help="install a chart archive.",
        description=INSTALL_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Arity is checked by the core so the error names the missing chart.
    install.add_argument(
        "chart",
        nargs="*",
        metavar="CHART",
        help="chart directory or archive",
    )
    install.add_argument(
        "--host",
        default="",
        help=(
            f"address of tiller server (default \"{DEFAULT_HOST}\", "
            f"or ${HOST_ENV_VAR} when set)"
        ),
    )
    # Accepted after the sub-command too; SUPPRESS keeps the global value.
    install.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="enable verbose output",
    )
    install.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="simulate an install",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_install(args: argparse.Namespace) -> int:
    """Run ``helm install``.

    Flow:
    1. Validate that exactly one chart reference was given.
    2. Resolve the Tiller address (flag > environment > default).
    3. Send the install request.
    4. Print the resulting release, if any.
    """
    from helm_cli.cli.render import print_release
    from helm_cli.core.arguments import chart_reference_from_args
    from helm_cli.core.endpoint import resolve_endpoint
    from helm_cli.core.install_service import InstallService
    from helm_cli.core.models import InstallOptions
    from helm_cli.infra.tiller_client import TillerHttpInstaller

    options = InstallOptions(
        chart_reference=chart_reference_from_args(args.chart),
        dry_run=args.dry_run,
    )
    host = resolve_endpoint(args.host)
    logger.debug("Using Tiller at %s", host)

    service = InstallService(TillerHttpInstaller())
    release = service.install(options, host)

    print_release(release, verbose=args.verbose)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the helm CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_install(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except HelmError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
