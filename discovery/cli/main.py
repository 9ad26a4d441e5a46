import logging
import sys
from inspect import getdoc

from .. import (
    __version__ as package_version,
    __name__ as package_name,
)
from ..config import ConfigError, ServiceNotFoundError, load_path
from ..config.parser import dump_obj
from .error import CommandError, CommandNotFoundError
from .dispatcher import Dispatcher

REDACTED = "<redacted>"


class Discovery:
    """Discovery inspects service discovery config files.

    Usage:
        discovery [options]
        discovery [options] <command> [<args>...]

    Options:
        --verbose, -v  Make discovery verbose
        --help         Print help message and exit
        --version      Print version and exit

    Available commands include:
        show      Show the effective configuration of services
        validate  Validate a config file
        help      Get help on a command
        version   Show the discovery version information
    """

    def __init__(self, options):
        if not options.get("<command>", ""):
            raise CommandError("No command is given", Discovery)
        self.global_option = options

        level = logging.DEBUG if options.get("--verbose") else logging.WARNING
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    delegate_mode = True
    __version__ = "{} {}".format(package_name, package_version)

    def show(self, options):
        """show prints the effective configuration, with the default API token
        and security applied, of every service or of a single one.

        Usage:
            show [options] <file> [<service>]

        Options:
            --show-secrets  Print API tokens and passwords instead of redacting them
            --help          Print help message and exit
        """
        registry = _load(options["<file>"])
        services = registry.get_effective_services()

        name = options.get("<service>")
        if name is not None:
            try:
                services = {name: registry.get_service(name)}
            except ServiceNotFoundError as e:
                raise CommandError(str(e))

        redact = not options.get("--show-secrets", False)
        output = {
            name: _effective_dict(config, redact)
            for name, config in sorted(services.items())
        }
        print(dump_obj(output), end="")

    def validate(self, options):
        """validate checks that a config file can be loaded

        Usage:
            validate [options] <file>

        Options:
            --help     Print help message and exit
        """
        registry = _load(options["<file>"])
        print(f"OK ({len(registry)} service(s))")

    def help(self, options):
        """help print the help message of a command

        Usage:
            help <command>
        """
        name = options.get("<command>", "").strip()
        if not name:
            raise CommandError("Command not given.", self.help)
        if name.startswith("_"):
            raise CommandError("Invalid command.")

        fn = getattr(self, name, None)
        if fn is None:
            raise CommandNotFoundError(self.help, name)

        print(getdoc(fn))
        sys.exit()

    def version(self, _):
        """version print discovery version

        Usage:
            version
        """
        print(self.__version__)


def _load(file):
    try:
        return load_path(file)
    except ConfigError as e:
        raise CommandError(str(e))


def _effective_dict(config, redact):
    d = config.to_dict(by_alias=True)
    if redact:
        if "apiToken" in d:
            d["apiToken"] = REDACTED
        if "keyStorePassword" in d.get("security", {}):
            d["security"]["keyStorePassword"] = REDACTED
    return d


def main():
    dispatcher = Dispatcher(Discovery)
    dispatcher.run(sys.argv[1:])
