"""Error kinds raised while converting a single command."""


class CommandError(RuntimeError):
    """Base exception for failures while handling a single command."""


class ParameterNotFound(CommandError):
    """Raised when a declared argument is missing from a command."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Parameter {name} not found")
        self.name = name


class ParameterConvert(CommandError):
    """Raised when an argument value does not match its type."""


class CommandNotFound(CommandError):
    """Raised when no message is registered for a command name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command {name} not found")
        self.name = name
