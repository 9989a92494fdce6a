"""Core / service layer — pure business logic and data models.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from helm_cli.core.arguments import chart_reference_from_args, check_args_length
from helm_cli.core.endpoint import DEFAULT_HOST, HOST_ENV_VAR, resolve_endpoint
from helm_cli.core.install_service import InstallService
from helm_cli.core.models import (
    ChartMetadata,
    InstallOptions,
    InstallResponse,
    Release,
    ReleaseInfo,
    ReleaseStatus,
)
from helm_cli.core.protocols import ReleaseInstaller

__all__: list[str] = [
    "DEFAULT_HOST",
    "HOST_ENV_VAR",
    "ChartMetadata",
    "InstallOptions",
    "InstallResponse",
    "InstallService",
    "Release",
    "ReleaseInfo",
    "ReleaseInstaller",
    "ReleaseStatus",
    "chart_reference_from_args",
    "check_args_length",
    "resolve_endpoint",
]
