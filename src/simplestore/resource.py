"""Request and reply envelopes exchanged with the transport layer."""

from dataclasses import dataclass
from enum import IntEnum


class ResourceStatus(IntEnum):
    OK = 200
    NOT_FOUND = 404


@dataclass(frozen=True)
class FetchRequest:
    """A request for the resource addressed by ``path`` (e.g. ``("product", "A1")``)."""

    path: tuple[str, ...]
    data: bytes | None = None

    def __post_init__(self):
        object.__setattr__(self, "path", tuple(self.path))

    def segment(self, index: int) -> str | None:
        if index < len(self.path) and self.path[index]:
            return self.path[index]
        return None


@dataclass(frozen=True)
class FetchReply:
    data: bytes = b""
    status: ResourceStatus = ResourceStatus.OK
