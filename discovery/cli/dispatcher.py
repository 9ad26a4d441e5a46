import logging
import sys
from inspect import getdoc, isclass

from docopt import docopt, DocoptExit

from .error import CommandError, CommandNotFoundError, ArgumentError

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Dispatcher routes argv to a command. A command is either a class, whose
    doc-string declares `<command> [<args>...]` and whose methods are the
    sub-commands, or a callable taking the parsed docopt options.
    """

    def __init__(self, command, posarg_name="<command>", restarg_name="<args>"):
        self.root = command
        self.version = getattr(command, "__version__", None)
        self._posarg_name = posarg_name
        self._restarg_name = restarg_name

    def run(self, argv):
        return self.run_command(self.root, argv)

    def run_command(self, command, argv):
        doc = (getdoc(command) or "").strip("\n")

        # A class delegates the rest of argv to one of its methods, so its
        # options have to come before the sub-command name.
        delegate_mode = getattr(command, "delegate_mode", isclass(command))

        try:
            options = docopt(doc, argv=argv, help=False, options_first=delegate_mode)
        except DocoptExit:
            raise CommandError("Invalid arguments.\n\n" + doc)

        if options.get("--help", False) or options.get("-h", False):
            self._exit_with(doc)

        if options.get("--version", False):
            version = getattr(command, "__version__", self.version)
            if version is None:
                raise ArgumentError(command, "--version")
            self._exit_with(version)

        name = options.get(self._posarg_name) if delegate_mode else None
        if name:
            return self.delegate(command, options, name)

        if callable(command):
            return command(options)

        raise ArgumentError(
            command, "Cannot find handler for arguments: '{}'".format(" ".join(argv))
        )

    def delegate(self, command, options, name):
        key = name.replace("-", "_")
        if key.startswith("_"):
            raise ArgumentError(command, key)

        instance = command(options)
        handler = getattr(instance, key, None)
        if handler is None:
            raise CommandNotFoundError(command, name)

        logger.debug("Dispatching to command '%s'", name)
        return self.run_command(handler, options.get(self._restarg_name))

    @staticmethod
    def _exit_with(message):
        if message:
            print(message)
        sys.exit()
