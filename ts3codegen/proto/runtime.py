"""Runtime support for routing incoming commands to message records."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from .commands import CanonicalCommand
from .errors import CommandNotFound
from .serialization import Message


@dataclass(frozen=True, slots=True)
class Notification:
    """A parsed notification tagged with the variant it was dispatched to.

    Example:
        match Notifications.parse(cmd):
            case Notification(NotificationKind.ClientLeftView, msg):
                forget(msg.client_id)
    """

    kind: StrEnum
    message: Message


class NotificationDispatcher:
    """Base class for generated notification dispatchers.

    Generated subclasses define:
        _notifications: ClassVar[dict[str, tuple[StrEnum, type[Message]]]]
            # command name -> (variant, record type)

    Example:
        notification = Notifications.parse(
            CanonicalCommand("notifyclientleftview", {"clid": "5", ...})
        )
    """

    _notifications: ClassVar[dict[str, tuple[StrEnum, type[Message]]]]

    @classmethod
    def parse(cls, cmd: CanonicalCommand) -> Notification:
        """Parse a command into the notification registered for its name.

        Raises:
            CommandNotFound: No notification uses ``cmd.command_name``.
            ParameterNotFound: A declared argument is missing.
            ParameterConvert: An argument has the wrong format.
        """
        try:
            kind, message_type = cls._notifications[cmd.command_name]
        except KeyError:
            raise CommandNotFound(cmd.command_name) from None

        return Notification(kind, message_type.from_command(cmd))

    @classmethod
    def command_names(cls) -> frozenset[str]:
        """Return every command name this dispatcher accepts."""
        return frozenset(cls._notifications)
