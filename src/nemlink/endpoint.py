"""Node endpoint descriptor."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Endpoint:
    """Host and port of a NIS node as handed to a transport layer."""

    host: str
    port: Optional[int]

    @property
    def url(self) -> str:
        return f"{self.host}:{self.port}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
