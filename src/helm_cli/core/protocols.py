"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from helm_cli.core.models import InstallResponse


class ReleaseInstaller(Protocol):
    """Contract for backends that submit install requests to a server.

    Any object that implements :meth:`install_release` with the correct
    signature satisfies this protocol structurally.
    """

    def install_release(
        self,
        chart_reference: str,
        dry_run: bool,
        *,
        host: str,
    ) -> InstallResponse:
        """Ask the server at *host* to install *chart_reference*.

        Parameters
        ----------
        chart_reference:
            Chart directory or archive path, relative to the working
            directory.
        dry_run:
            When ``True`` the server simulates the install.
        host:
            Server address as resolved by
            :func:`~helm_cli.core.endpoint.resolve_endpoint`.

        Implementations must map all transport exceptions to
        :class:`~helm_cli.exceptions.HelmError` subclasses.

        Raises
        ------
        ChartNotFoundError
            When the chart reference cannot be loaded.
        RemoteInstallError
            When the request fails or the server rejects it.
        """
        ...  # pragma: no cover
