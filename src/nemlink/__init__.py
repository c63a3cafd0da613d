"""Connection configuration for NEM node clients."""

from nemlink.config.settings import ConnectionOptions
from nemlink.connection import NetworkConnection
from nemlink.endpoint import Endpoint
from nemlink.networks import NetworkId, NetworkSelector, get_network_for_address

__version__ = "0.1.0"
__all__ = [
    "NetworkConnection",
    "ConnectionOptions",
    "Endpoint",
    "NetworkId",
    "NetworkSelector",
    "get_network_for_address",
    "__version__",
]
