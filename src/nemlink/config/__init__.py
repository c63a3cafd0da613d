"""Connection defaults and options."""

from nemlink.config.settings import (
    DEFAULT_NIS_PORT,
    DEFAULT_NODES,
    DEFAULT_SCHEME,
    DEFAULT_WS_SCHEME,
    WS_PORT,
    WSS_PORT,
    ConnectionOptions,
)

__all__ = [
    "ConnectionOptions",
    "DEFAULT_NIS_PORT",
    "DEFAULT_NODES",
    "DEFAULT_SCHEME",
    "DEFAULT_WS_SCHEME",
    "WS_PORT",
    "WSS_PORT",
]
