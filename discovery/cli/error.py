from inspect import getdoc

__all__ = (
    "CommandError",
    "CommandNotFoundError",
    "ArgumentError",
)


def _with_usage(message, command):
    doc = getdoc(command) if command is not None else None
    if doc:
        message = message.strip("\n") + "\n\n" + doc.strip("\n")
    return message


class CommandError(SystemExit):
    """Exit the CLI with `message`, followed by the usage of `command`."""

    def __init__(self, message, command=None):
        super().__init__(_with_usage(message, command))

        self.command = command


class CommandNotFoundError(CommandError):
    def __init__(self, command, name):
        super().__init__(f"Command '{name}' not found.", command)


class ArgumentError(CommandError):
    def __init__(self, command, argv):
        if isinstance(argv, list):
            argv = " ".join(argv)

        super().__init__(f"Unexpected argument(s): '{argv}'", command)
