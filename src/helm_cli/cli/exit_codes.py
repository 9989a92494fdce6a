"""Process exit codes returned by the ``helm`` command."""

from __future__ import annotations

SUCCESS: int = 0
"""The command completed; any release has been printed."""

GENERAL_ERROR: int = 1
"""A HelmError (bad arguments, missing chart, failed install) was reported."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the HelmError hierarchy reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
