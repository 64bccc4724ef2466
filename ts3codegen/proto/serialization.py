"""Record base classes for generated ts3codegen messages."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from .commands import CanonicalCommand, Command
from .errors import CommandError as CommandError
from .errors import CommandNotFound as CommandNotFound
from .errors import ParameterConvert as ParameterConvert
from .errors import ParameterNotFound as ParameterNotFound


@dataclass(frozen=True)
class WireFieldInfo:
    """Metadata for a message record field."""

    wire_name: str
    semantic_type: str
    is_list: bool = False


def message_field(wire_name: str, type: str, *, is_list: bool = False) -> Any:
    """Define a record field with its wire name and semantic type.

    Args:
        wire_name: The key the field uses on the wire (e.g. "clid").
        type: The semantic type tag (e.g. "ClientId", "Duration").
        is_list: True when the field holds a sequence of values.

    Returns:
        A dataclass field with wire metadata attached.
    """
    return field(metadata={"ts3": WireFieldInfo(wire_name, type, is_list)})


class Message:
    """Base class for generated message records.

    Subclasses are @dataclass decorated, declare their fields with
    message_field() and set ``command_name``.

    Example:
        @dataclass
        class ClientLeftView(Message):
            command_name: ClassVar[str] = "notifyclientleftview"
            client_id: ClientId = message_field("clid", "ClientId")
    """

    command_name: ClassVar[str]

    @classmethod
    def from_command(cls, cmd: CanonicalCommand) -> Self:
        """Build a record from a decoded command. Generated code overrides this.

        Raises:
            ParameterNotFound: A declared argument is missing.
            ParameterConvert: An argument has the wrong format.
        """
        raise NotImplementedError("from_command() must be implemented by generated code")

    def static_args(self) -> list[tuple[str, str]]:
        """Serialize the declared fields in order. Generated code overrides this."""
        raise NotImplementedError("static_args() must be implemented by generated code")

    def to_command(self) -> Command:
        """Serialize this record, leaving it usable afterwards."""
        return Command(self.command_name, self.static_args(), [])

    def into_command(self) -> Command:
        """Serialize a record the caller is done with.

        The returned command may share value objects with the record.
        """
        return Command(self.command_name, self.static_args(), [])


@dataclass
class Response(Message):
    """Base class for messages that answer a request.

    The return code pairs the answer with its request; it is never part of
    the serialized arguments.
    """

    return_code: str

    def get_return_code(self) -> str:
        return self.return_code

    def set_return_code(self, return_code: str) -> None:
        self.return_code = return_code
