"""Runtime value types for ts3codegen messages.

Entity ids and string handles are wrapped so that a client id cannot be
passed where a channel id is expected. Each integer wrapper records the
integer type it travels as on the wire.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class IntId:
    """Base class for integer entity ids."""

    wire_type: ClassVar[str] = "u64"

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class ClientId(IntId):
    """Per-connection client id."""

    wire_type: ClassVar[str] = "u16"


@dataclass(frozen=True, slots=True)
class ClientDbId(IntId):
    """Database id of a client."""


@dataclass(frozen=True, slots=True)
class ChannelId(IntId):
    pass


@dataclass(frozen=True, slots=True)
class ServerGroupId(IntId):
    pass


@dataclass(frozen=True, slots=True)
class ChannelGroupId(IntId):
    pass


@dataclass(frozen=True, slots=True)
class Uid:
    """Unique identity of a client, kept exactly as sent."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IconHash:
    """Icon id, stored as a signed 32-bit integer."""

    value: int


ID_TYPES: dict[str, type[IntId]] = {
    "ClientId": ClientId,
    "ClientDbId": ClientDbId,
    "ChannelId": ChannelId,
    "ServerGroupId": ServerGroupId,
    "ChannelGroupId": ChannelGroupId,
}
