"""
esdocs Config — Host Resolution
===============================

The service address comes from a single environment key, ``ES_HOST``.
Port and scheme are fixed.

Usage:
    config = HostConfig.from_env()          # reads os.environ
    config = HostConfig.from_env({"ES_HOST": "10.0.0.5"})
    config.url                              # "http://10.0.0.5:9200"
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


ES_HOST_VAR = "ES_HOST"
DEFAULT_HOST = "1.2.3.4"
DEFAULT_PORT = 9200
DEFAULT_SCHEME = "http"


@dataclass(frozen=True)
class HostConfig:
    """Address of the single Elasticsearch node esdocs talks to."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    scheme: str = DEFAULT_SCHEME

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "HostConfig":
        """
        Build a config from an environment mapping.

        Args:
            env: Key/value source (default: ``os.environ``)

        Returns:
            HostConfig with ``host`` taken from ``ES_HOST``, or the
            placeholder default when the key is unset or blank
        """
        if env is None:
            env = os.environ
        host = (env.get(ES_HOST_VAR) or "").strip()
        return cls(host=host or DEFAULT_HOST)
