"""Domain models for helm-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime


# ---------------------------------------------------------------------------
# Install request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallOptions:
    """Parameters of a single install invocation."""

    chart_reference: str
    """Path to a chart directory or archive, relative to the working directory."""

    dry_run: bool = False
    """Simulate the install without persisting anything on the server."""


# ---------------------------------------------------------------------------
# Release
# ---------------------------------------------------------------------------

class ReleaseStatus(enum.Enum):
    """Lifecycle state of a release as reported by the server."""

    UNKNOWN = "UNKNOWN"
    DEPLOYED = "DEPLOYED"
    DELETED = "DELETED"
    SUPERSEDED = "SUPERSEDED"
    FAILED = "FAILED"

    @classmethod
    def parse(cls, value: object) -> ReleaseStatus:
        """Map a wire value to a status; anything unrecognised is ``UNKNOWN``."""
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                return cls.UNKNOWN
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """Deployment bookkeeping attached to a release."""

    status: ReleaseStatus
    last_deployed: datetime | None = None


@dataclass(frozen=True, slots=True)
class ChartMetadata:
    """Name and version of the chart a release was built from."""

    name: str
    version: str


@dataclass(frozen=True, slots=True)
class Release:
    """A named deployment instance produced by installing a chart."""

    name: str
    info: ReleaseInfo
    chart: ChartMetadata
    manifest: str
    """Fully rendered resource definitions."""


@dataclass(frozen=True, slots=True)
class InstallResponse:
    """Server reply to an install request.

    ``release`` may be ``None`` even when the request succeeded.
    """

    release: Release | None = None
