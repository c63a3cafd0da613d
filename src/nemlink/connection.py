"""NEM network connection configuration."""

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from nemlink.config.settings import (
    DEFAULT_NIS_PORT,
    DEFAULT_NODES,
    DEFAULT_SCHEME,
    DEFAULT_WS_SCHEME,
    WS_PORT,
    WSS_PORT,
    ConnectionOptions,
)
from nemlink.endpoint import Endpoint
from nemlink.networks import (
    FALLBACK_NETWORK,
    NetworkSelector,
    get_network_for_address,
    network_name,
    parse_int,
    resolve_network,
)

logger = logging.getLogger(__name__)

_HTTP_MARKERS = ("http://", "https://")


def _split_http_marker(value: str) -> Optional[Tuple[str, str]]:
    """
    Split a string around its first ``http://`` or ``https://`` marker.

    Returns:
        (text before the marker, text after it), or None if there is no marker
    """
    found = None
    for marker in _HTTP_MARKERS:
        index = value.find(marker)
        if index != -1 and (found is None or index < found[0]):
            found = (index, marker)

    if found is None:
        return None
    index, marker = found
    return value[:index], value[index + len(marker):]


def _replace_http_marker(value: str, replacement: str) -> str:
    parts = _split_http_marker(value)
    if parts is None:
        return value
    before, after = parts
    return before + replacement + after


class NetworkConnection:
    """
    Connection settings for a NEM node.

    Holds the network id, the canonical node host (``scheme://address``)
    and the NIS port, and derives the websocket streaming endpoint from
    them. Invalid input never raises; it degrades to testnet defaults.
    """

    def __init__(
        self,
        network: Union[str, int, NetworkSelector, None],
        host: Optional[str],
        port: Union[int, str, None],
        ws_scheme: Optional[str] = None,
    ):
        """
        Initialize the connection.

        Args:
            network: Network name (any casing), numeric id or NetworkSelector
            host: Node host, with or without scheme. Empty uses the default node.
            port: NIS API port
            ws_scheme: Websocket scheme, "ws" (default) or "wss"
        """
        self.ws_scheme = ws_scheme or DEFAULT_WS_SCHEME
        self.network_id: int = resolve_network(network)
        self.host: str = ""
        self.port: Optional[int] = None

        self.set_host(host)
        self.set_port(port)

        # Websocket subscriptions, managed by the caller
        self.stream: List[Any] = []

    @classmethod
    def from_options(
        cls, options: ConnectionOptions, ws_scheme: Optional[str] = None
    ) -> "NetworkConnection":
        """
        Create a connection from ConnectionOptions.

        A missing port falls back to the default NIS port.
        """
        port = options.port if options.port is not None else DEFAULT_NIS_PORT
        return cls(options.network, options.host, port, ws_scheme)

    @property
    def ws_port(self) -> int:
        return WSS_PORT if self.ws_scheme.startswith("wss") else WS_PORT

    @property
    def node(self) -> Endpoint:
        """NIS API endpoint."""
        return Endpoint(self.get_host(), self.port)

    @property
    def ws_node(self) -> Endpoint:
        """Websocket endpoint on the same host."""
        return Endpoint(self.get_host(), self.ws_port)

    @property
    def ws_url(self) -> str:
        return f"{self.get_host(self.ws_scheme)}:{self.ws_port}"

    def set_options(self, opts: Union[ConnectionOptions, Mapping[str, Any]]) -> None:
        """
        Apply several settings at once.

        Recognised keys are "network", "host" and "port". Other keys are ignored.

        Args:
            opts: ConnectionOptions or a mapping of option names to values
        """
        if isinstance(opts, ConnectionOptions):
            values = opts.as_dict()
        else:
            values = dict(opts)

        if "network" in values:
            self.set_network(values.pop("network"))
        if "host" in values:
            self.set_host(values.pop("host"))
        if "port" in values:
            self.set_port(values.pop("port"))

        if values:
            logger.debug("Ignoring unknown connection options: %s", sorted(values, key=str))

    def set_network(self, network: Union[str, int, NetworkSelector, None]) -> None:
        """
        Set the network id used for NIS requests.

        Args:
            network: Network name (any casing), numeric id or NetworkSelector.
                Unrecognised values and 0 select testnet.
        """
        self.network_id = resolve_network(network)

    def set_host(self, host: Optional[str]) -> None:
        """
        Set the node host.

        The host is stored as ``scheme://address``. An ``http`` or ``https``
        scheme given in the input is kept, otherwise ``http`` is used.

        Args:
            host: Node host, with or without scheme. Empty or non-string
                values use the default node of the current network, or the
                testnet node.
        """
        if not host or not isinstance(host, str):
            name = self.get_network_name()
            if name not in DEFAULT_NODES:
                name = FALLBACK_NETWORK
            logger.debug("No host given, using %s node", name)
            host = DEFAULT_NODES[name]

        scheme = None
        if host.startswith("http") and "://" in host:
            scheme = host.split("://", 1)[0]

        address = _replace_http_marker(host, "")
        # Collapse stacked prefixes such as "http://https://node"
        while address.startswith(_HTTP_MARKERS):
            address = _replace_http_marker(address, "")

        self.host = f"{scheme or DEFAULT_SCHEME}://{address}"

    def set_port(self, port: Union[int, str, None]) -> None:
        """
        Set the NIS API port.

        Args:
            port: Port number or numeric string. Stored as None if unparsable.
        """
        self.port = parse_int(port)
        if self.port is None:
            logger.debug("Could not parse port %r", port)

    def get_network(self) -> int:
        return self.network_id

    def get_network_name(self) -> Optional[str]:
        """Name of the configured network, None for unknown ids."""
        return network_name(self.network_id)

    def get_host(self, scheme: Union[str, bool, None] = None) -> str:
        """
        Get the node host.

        Args:
            scheme: False to drop the scheme, another scheme name (e.g. "ws")
                to swap it in for http(s). Default returns the canonical host.

        Returns:
            Host string
        """
        if scheme is False:
            return _replace_http_marker(self.host, "")
        if isinstance(scheme, str) and scheme and not scheme.startswith("http"):
            return _replace_http_marker(self.host, scheme.removesuffix("://") + "://")
        return self.host

    def get_port(self) -> Optional[int]:
        return self.port

    get_network_for_address = staticmethod(get_network_for_address)

    def __repr__(self) -> str:
        return (
            f"NetworkConnection(network_id={self.network_id!r}, host={self.host!r}, "
            f"port={self.port!r}, ws_scheme={self.ws_scheme!r})"
        )
