"""helm-cli — client for installing charts through a Tiller server.

Built with a strict layered architecture: ``cli`` → ``core`` ← ``infra``.
"""

from helm_cli.version import __version__

__all__: list[str] = ["__version__"]
