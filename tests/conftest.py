"""Shared pytest fixtures and configuration for the helm-cli test suite.

Guidelines
----------
* No network access in any test; httpx is driven by ``MockTransport``.
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's ``TILLER_HOST``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from helm_cli.core.endpoint import HOST_ENV_VAR
from helm_cli.core.models import ChartMetadata, Release, ReleaseInfo, ReleaseStatus


@pytest.fixture(autouse=True)
def _clear_tiller_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HOST_ENV_VAR, raising=False)


def make_release(**overrides: Any) -> Release:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, Any] = {
        "name": "myapp",
        "info": ReleaseInfo(
            status=ReleaseStatus.DEPLOYED,
            last_deployed=datetime(2016, 4, 5, 9, 7, 3),
        ),
        "chart": ChartMetadata(name="mychart", version="1.0.0"),
        "manifest": "kind: Pod",
    }
    defaults.update(overrides)
    return Release(**defaults)
