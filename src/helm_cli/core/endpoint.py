"""Tiller server address resolution.

Precedence, highest first:

1. The ``--host`` flag.
2. The ``TILLER_HOST`` environment variable.
3. :data:`DEFAULT_HOST`.

The resolved address is returned to the caller and passed explicitly to
the install service; nothing is stored at module level.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

HOST_ENV_VAR: str = "TILLER_HOST"
"""Environment variable consulted when no ``--host`` flag is given."""

DEFAULT_HOST: str = ":44134"
"""Built-in Tiller address used when neither flag nor environment set one."""


def resolve_endpoint(
    flag_host: str | None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the server address for this invocation.

    Empty strings count as unset at every level, so the result is never
    empty.
    """
    if flag_host:
        return flag_host

    env = os.environ if environ is None else environ
    env_host = env.get(HOST_ENV_VAR, "")
    if env_host:
        return env_host

    return DEFAULT_HOST
