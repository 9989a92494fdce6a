"""Plain-text rendering of install results on stdout."""

from __future__ import annotations

from datetime import datetime
from typing import TextIO

from helm_cli.core.models import Release


def format_timestamp(value: datetime | None) -> str:
    """Format *value* in the ANSI-C layout, e.g. ``Mon Jan  2 15:04:05 2006``."""
    if value is None:
        return ""
    return f"{value:%a %b} {value.day:>2} {value:%H:%M:%S %Y}"


def print_release(
    release: Release | None,
    *,
    verbose: bool,
    file: TextIO | None = None,
) -> None:
    """Print *release* to stdout (or *file*).

    Quiet mode prints only the release name.  Verbose mode prints name,
    deploy time and status, chart, and the full manifest.  ``None``
    prints nothing.
    """
    if release is None:
        return
    if not verbose:
        print(release.name, file=file)
        return

    print(f"NAME:   {release.name}", file=file)
    print(
        f"INFO:   {format_timestamp(release.info.last_deployed)} {release.info.status}",
        file=file,
    )
    print(f"CHART:  {release.chart.name} {release.chart.version}", file=file)
    print(f"MANIFEST: {release.manifest}", file=file)
