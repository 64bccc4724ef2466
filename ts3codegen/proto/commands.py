"""Generic wire commands exchanged with the protocol encoder and decoder."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import ParameterNotFound


@dataclass(frozen=True, slots=True)
class CanonicalCommand:
    """A decoded incoming command: a name plus a key/value argument map."""

    command_name: str
    args: Mapping[str, str] = field(default_factory=dict)

    def arg(self, name: str) -> str:
        """Return the raw value of argument ``name``.

        Raises:
            ParameterNotFound: If the command carries no such argument.
        """
        try:
            return self.args[name]
        except KeyError:
            raise ParameterNotFound(name) from None


@dataclass(slots=True)
class Command:
    """An outgoing command ready for the wire encoder."""

    command_name: str
    static_args: list[tuple[str, str]] = field(default_factory=list)
    list_args: list[list[tuple[str, str]]] = field(default_factory=list)

    def push(self, key: str, value: str) -> None:
        """Append a static argument."""
        self.static_args.append((key, value))

    def keys(self) -> list[str]:
        return [key for key, _ in self.static_args]
