"""NEM network identifiers, network selectors and address classification."""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)


class NetworkId(IntEnum):
    """Numeric identifiers of the known NEM networks."""

    MAINNET = 104
    TESTNET = -104
    MIJIN = 96


@dataclass(frozen=True)
class NetworkInfo:
    """Static description of a NEM network."""

    name: str
    id: NetworkId
    address_prefix: str


NETWORKS: Mapping[str, NetworkInfo] = MappingProxyType(
    {
        "mainnet": NetworkInfo("mainnet", NetworkId.MAINNET, "N"),
        "testnet": NetworkInfo("testnet", NetworkId.TESTNET, "T"),
        "mijin": NetworkInfo("mijin", NetworkId.MIJIN, "M"),
    }
)

# Network used whenever a selector cannot be resolved
FALLBACK_NETWORK = "testnet"

# First address character to network name, unknown characters are mijin
ADDRESS_PREFIXES: Mapping[str, str] = MappingProxyType(
    {info.address_prefix: info.name for info in NETWORKS.values()}
)

_INT_PATTERN = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(?!0[xX])(\d+))")


def parse_int(value) -> Optional[int]:
    """
    Parse the leading integer of a value.

    Integers pass through, floats are truncated toward zero and strings
    are read up to the first character that is not part of the number
    (``" 7890abc"`` gives 7890, ``"0x1f"`` gives 31).

    Args:
        value: Any value

    Returns:
        The parsed integer, or None if nothing could be parsed
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _INT_PATTERN.match(value)
        if not match:
            return None
        sign, hex_digits, digits = match.groups()
        number = int(hex_digits, 16) if hex_digits else int(digits)
        return -number if sign == "-" else number
    return None


class SelectorKind(Enum):
    """How a network was selected."""

    NAME = "name"
    ID = "id"


@dataclass(frozen=True)
class NetworkSelector:
    """
    A network chosen either by name or by numeric id.

    Names are matched case-insensitively against the known networks. Ids
    are adopted as-is when they parse to a non-zero integer. Everything
    else resolves to the testnet id.
    """

    kind: SelectorKind
    value: Union[str, int, float]

    @classmethod
    def by_name(cls, name: str) -> "NetworkSelector":
        return cls(SelectorKind.NAME, name)

    @classmethod
    def by_id(cls, network_id: Union[int, float]) -> "NetworkSelector":
        return cls(SelectorKind.ID, network_id)

    @classmethod
    def coerce(cls, value) -> Optional["NetworkSelector"]:
        """
        Build a selector from a raw value.

        Args:
            value: Network name, numeric id or an existing selector

        Returns:
            The selector, or None when the value is neither a name nor a number
        """
        if isinstance(value, NetworkSelector):
            return value
        if isinstance(value, str):
            return cls.by_name(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.by_id(value)
        return None

    def resolve(self) -> int:
        """
        Resolve this selector to a network id.

        Returns:
            A NetworkId member for known networks, or the raw integer for
            other non-zero ids
        """
        if self.kind is SelectorKind.NAME:
            info = NETWORKS.get(str(self.value).lower())
            if info is not None:
                return info.id
        else:
            # 0 is deliberately not accepted and falls through to testnet
            parsed = parse_int(self.value)
            if parsed:
                return _as_network_id(parsed)

        logger.debug("Unrecognised network %r, using %s", self.value, FALLBACK_NETWORK)
        return NETWORKS[FALLBACK_NETWORK].id


def _as_network_id(value: int) -> int:
    try:
        return NetworkId(value)
    except ValueError:
        return value


def resolve_network(network) -> int:
    """
    Resolve a network name, id or selector to a network id.

    Args:
        network: Name (any casing), numeric id or NetworkSelector

    Returns:
        The resolved network id, testnet's id when unresolvable
    """
    selector = NetworkSelector.coerce(network)
    if selector is None:
        logger.debug("Cannot select a network from %r, using %s", network, FALLBACK_NETWORK)
        return NETWORKS[FALLBACK_NETWORK].id
    return selector.resolve()


def network_name(network_id: int) -> Optional[str]:
    """Return the name of a known network id."""
    for info in NETWORKS.values():
        if info.id == network_id:
            return info.name
    return None


def get_network_for_address(address: str) -> str:
    """
    Return the network name for an address.

    The first character of a NEM address identifies its network.

    Args:
        address: Account address

    Returns:
        One of "mainnet", "testnet" or "mijin"
    """
    if not isinstance(address, str):
        raise TypeError(f"address must be a string, got {type(address).__name__}")
    return ADDRESS_PREFIXES.get(address[:1], "mijin")
