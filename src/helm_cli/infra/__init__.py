"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Tiller server and the local
filesystem.  Every raw third-party exception is caught here and
re-raised as a :class:`~helm_cli.exceptions.HelmError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from helm_cli.infra.config import ClientSettings
from helm_cli.infra.tiller_client import TillerHttpInstaller, base_url_for, load_chart

__all__: list[str] = [
    "ClientSettings",
    "TillerHttpInstaller",
    "base_url_for",
    "load_chart",
]
