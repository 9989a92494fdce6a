"""Core install service — dispatches a single install request.

The service delegates the transport to a
:class:`~helm_cli.core.protocols.ReleaseInstaller` injected at
construction time.

Guarantees
----------
* Exactly one call to the installer per :meth:`InstallService.install`.
* No retries, no I/O of its own.
* Only :class:`~helm_cli.exceptions.HelmError` subclasses escape.
"""

from __future__ import annotations

import logging

from helm_cli.core.models import InstallOptions, Release
from helm_cli.core.protocols import ReleaseInstaller
from helm_cli.exceptions import HelmError, RemoteInstallError, pretty_error

logger = logging.getLogger(__name__)


class InstallService:
    """Stateless service that submits an install request.

    Parameters
    ----------
    installer:
        Any object satisfying the :class:`ReleaseInstaller` protocol.
    """

    def __init__(self, installer: ReleaseInstaller) -> None:
        self._installer: ReleaseInstaller = installer

    def install(self, options: InstallOptions, host: str) -> Release | None:
        """Install ``options.chart_reference`` via the server at *host*.

        Returns
        -------
        Release | None
            The release reported by the server.  ``None`` is a valid
            successful outcome and must not be treated as an error.

        Raises
        ------
        ChartNotFoundError
            When the installer cannot load the chart.
        RemoteInstallError
            When the install request fails for any other reason.
        """
        logger.debug(
            "Installing %s on %s (dry_run=%s)",
            options.chart_reference,
            host,
            options.dry_run,
        )
        try:
            response = self._installer.install_release(
                options.chart_reference,
                options.dry_run,
                host=host,
            )
        except HelmError:
            # Already one of ours; propagate unchanged.
            raise
        except Exception as exc:
            raise RemoteInstallError(pretty_error(str(exc))) from exc

        if response.release is None:
            logger.debug("Server reported success without a release")
        return response.release
