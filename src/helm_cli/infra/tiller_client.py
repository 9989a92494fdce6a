"""httpx backed implementation of :class:`~helm_cli.core.protocols.ReleaseInstaller`.

This module is the **only** place in the codebase that talks to Tiller.
All httpx exceptions are caught here and re-raised as
:class:`~helm_cli.exceptions.RemoteInstallError` — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

import io
import logging
import re
import tarfile
from datetime import datetime
from pathlib import Path
from typing import Any

from helm_cli.core.models import (
    ChartMetadata,
    InstallResponse,
    Release,
    ReleaseInfo,
    ReleaseStatus,
)
from helm_cli.exceptions import (
    ChartNotFoundError,
    EnvironmentError,
    RemoteInstallError,
    pretty_error,
)
from helm_cli.infra.config import ClientSettings, load_settings

logger = logging.getLogger(__name__)

INSTALL_PATH: str = "/v1/releases"

_FRACTION = re.compile(r"\.(\d+)")


# ---------------------------------------------------------------------------
# Helpers (pure / filesystem)
# ---------------------------------------------------------------------------

def base_url_for(host: str) -> str:
    """Turn a Tiller address into an HTTP base URL.

    ``:44134`` → ``http://localhost:44134``; ``tiller:44134`` →
    ``http://tiller:44134``; addresses with a scheme are kept as is.
    """
    if "://" in host:
        return host.rstrip("/")
    if host.startswith(":"):
        host = f"localhost{host}"
    return f"http://{host}"


def load_chart(chart_reference: str, cwd: Path | None = None) -> tuple[str, bytes]:
    """Read *chart_reference* into ``(filename, archive bytes)``.

    A directory is packed into an in-memory gzip tarball rooted at the
    directory name; a file is assumed to already be a chart archive.
    """
    path = (cwd or Path.cwd()) / chart_reference
    if path.is_dir():
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
            archive.add(path, arcname=path.name)
        return f"{path.name}.tgz", buffer.getvalue()
    if path.is_file():
        return path.name, path.read_bytes()
    raise ChartNotFoundError(
        f"Chart not found: {chart_reference}",
        hint="Pass a chart directory or archive relative to the current directory.",
    )


class TillerHttpInstaller:
    """Concrete :class:`ReleaseInstaller` that posts charts to Tiller over HTTP.

    Usage::

        installer = TillerHttpInstaller()
        response = installer.install_release("./mychart", False, host=":44134")

    Parameters
    ----------
    settings:
        Transport settings; read from the environment when omitted,
        raising :class:`~helm_cli.exceptions.ConfigurationError` on bad values.
    transport:
        Optional ``httpx`` transport, used by tests to avoid the network.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: Any = None,
    ) -> None:
        self._settings: ClientSettings = settings or load_settings()
        self._transport: Any = transport

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def install_release(
        self,
        chart_reference: str,
        dry_run: bool,
        *,
        host: str,
    ) -> InstallResponse:
        """Upload the chart and ask Tiller to install it.

        Raises
        ------
        ChartNotFoundError
            When *chart_reference* is neither a directory nor a file.
        RemoteInstallError
            On transport failures, non-2xx replies or unreadable bodies.
        """
        try:
            import httpx
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "httpx is not installed. Install with: pip install httpx",
            ) from exc

        filename, payload = load_chart(chart_reference)
        base_url = base_url_for(host)
        logger.debug("POST %s%s (%d bytes)", base_url, INSTALL_PATH, len(payload))

        try:
            with httpx.Client(
                base_url=base_url,
                timeout=httpx.Timeout(self._settings.timeout_seconds),
                headers={"User-Agent": self._settings.user_agent},
                transport=self._transport,
            ) as client:
                response = client.post(
                    INSTALL_PATH,
                    params={"dry_run": "true" if dry_run else "false"},
                    files={"chart": (filename, payload, "application/gzip")},
                )
        except httpx.HTTPError as exc:
            raise RemoteInstallError(
                pretty_error(str(exc)),
                hint=f"Is Tiller reachable at {host}?",
            ) from exc

        if response.is_error:
            raise RemoteInstallError(self._error_message(response))

        try:
            body: Any = response.json()
        except ValueError as exc:
            raise RemoteInstallError(
                "Tiller returned a response that is not valid JSON.",
            ) from exc

        if not isinstance(body, dict):
            raise RemoteInstallError("Tiller returned an unexpected data structure.")

        return InstallResponse(release=self._parse_release(body.get("release")))

    # ------------------------------------------------------------------
    # Response parsing
    # ------------------------------------------------------------------

    @staticmethod
    def _error_message(response: Any) -> str:
        """Extract the server's error text from a failed response."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return pretty_error(str(body["error"]))
        text = response.text.strip()
        if text:
            return pretty_error(text)
        return f"Tiller returned HTTP {response.status_code}"

    @staticmethod
    def _parse_timestamp(raw: object) -> datetime | None:
        """Parse an RFC 3339 timestamp into local time.

        Fractions are cut or padded to microseconds, so nanosecond
        precision from the server is accepted.  Values without an offset
        are taken as local time.
        """
        if not isinstance(raw, str) or not raw:
            return None
        normalized = _FRACTION.sub(
            lambda match: "." + match.group(1)[:6].ljust(6, "0"),
            raw.replace("Z", "+00:00"),
            count=1,
        )
        try:
            return datetime.fromisoformat(normalized).astimezone()
        except ValueError:
            logger.warning("Ignoring unparseable last_deployed value %r", raw)
            return None

    @classmethod
    def _parse_release(cls, raw: object) -> Release | None:
        """Convert the ``release`` object of a reply into a :class:`Release`."""
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise RemoteInstallError("Tiller returned a malformed release.")

        info: object = raw.get("info") or {}
        chart: object = raw.get("chart") or {}
        if not isinstance(info, dict) or not isinstance(chart, dict):
            raise RemoteInstallError("Tiller returned a malformed release.")
        # Release payloads nest name/version under chart.metadata; accept flat too.
        metadata: object = chart.get("metadata") or chart
        if not isinstance(metadata, dict):
            raise RemoteInstallError("Tiller returned a malformed release.")

        return Release(
            name=str(raw.get("name", "")),
            info=ReleaseInfo(
                status=ReleaseStatus.parse(info.get("status")),
                last_deployed=cls._parse_timestamp(info.get("last_deployed")),
            ),
            chart=ChartMetadata(
                name=str(metadata.get("name", "")),
                version=str(metadata.get("version", "")),
            ),
            manifest=str(raw.get("manifest", "")),
        )
