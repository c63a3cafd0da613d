"""Connection configuration settings."""

import os
import re
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from nemlink.networks import NetworkSelector

DEFAULT_NODES: Mapping[str, str] = MappingProxyType(
    {
        "mainnet": "hugealice.nem.ninja",
        "testnet": "bigalice2.nem.ninja",
    }
)

DEFAULT_SCHEME = "http"
DEFAULT_NIS_PORT = 7890

# Websocket ports
DEFAULT_WS_SCHEME = "ws"
WS_PORT = 7778
WSS_PORT = 7779

_NUMERIC_ID = re.compile(r"[+-]?\d+")


@dataclass
class ConnectionOptions:
    """
    Options that can be applied to a connection in bulk.

    Fields left at None are not applied.
    """

    network: Optional[Union[str, int, NetworkSelector]] = None
    host: Optional[str] = None
    port: Optional[Union[int, str]] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the options that are set, in application order."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not None
        }

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, prefix: str = "NEM_"
    ) -> "ConnectionOptions":
        """
        Read options from environment variables.

        Looks up ``<prefix>NETWORK``, ``<prefix>HOST`` and ``<prefix>PORT``.
        Missing or empty variables are left unset.

        Args:
            environ: Variables to read, defaults to os.environ
            prefix: Variable name prefix

        Returns:
            ConnectionOptions with the values found
        """
        if environ is None:
            environ = os.environ

        values = {}
        for field in fields(cls):
            value = environ.get(prefix + field.name.upper())
            values[field.name] = value if value else None

        # Numeric network ids arrive as strings
        network = values["network"]
        if network is not None and _NUMERIC_ID.fullmatch(network.strip()):
            values["network"] = int(network)

        return cls(**values)
