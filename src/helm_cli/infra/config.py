"""Transport settings for the Tiller client.

Values come from ``HELM_*`` environment variables (pydantic-settings).
The server address is not a field here; it follows the
flag > ``TILLER_HOST`` > default precedence of
:func:`helm_cli.core.endpoint.resolve_endpoint`.
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from helm_cli.exceptions import ConfigurationError
from helm_cli.version import __version__

ENV_PREFIX: str = "HELM_"


class ClientSettings(BaseSettings):
    """Settings shared by every request the client sends."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
    )

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"helm-cli/{__version__}",
        min_length=1,
        description="User-Agent header sent to Tiller.",
    )


def load_settings() -> ClientSettings:
    """Build :class:`ClientSettings`, reporting bad values as a HelmError.

    Raises
    ------
    ConfigurationError
        When a ``HELM_*`` variable fails validation; the hint names it.
    """
    try:
        return ClientSettings()
    except ValidationError as exc:
        names = sorted(
            {
                f"{ENV_PREFIX}{str(error['loc'][0]).upper()}"
                for error in exc.errors()
                if error.get("loc")
            }
        )
        details = "; ".join(error["msg"] for error in exc.errors())
        raise ConfigurationError(
            f"Invalid client settings: {details}",
            hint=f"Check or unset {', '.join(names) or 'the HELM_* variables'}.",
        ) from exc
