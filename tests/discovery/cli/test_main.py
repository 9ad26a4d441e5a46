import pytest

from ruamel.yaml import YAML

from discovery import __version__
from discovery.cli.dispatcher import Dispatcher
from discovery.cli.error import CommandError, CommandNotFoundError
from discovery.cli.main import Discovery


def run(*argv):
    return Dispatcher(Discovery).run(list(argv))


def test_show(datadir, capsys):
    run("show", str(datadir / "discovery.yml"))

    output = YAML(typ="safe").load(capsys.readouterr().out)

    assert list(output) == ["billing", "ledger", "search"]
    assert output["search"] == {
        "uris": ["https://search-1:8443", "https://search-2:8443"],
        "apiToken": "<redacted>",
        "security": {
            "trustStorePath": "/etc/ssl/truststore.jks",
            "trustStoreType": "JKS",
            "keyStoreType": "JKS",
        },
    }
    assert output["ledger"]["security"]["keyStorePassword"] == "<redacted>"


def test_show_service(datadir, capsys):
    run("show", "--show-secrets", str(datadir / "discovery.yml"), "billing")

    output = YAML(typ="safe").load(capsys.readouterr().out)

    assert list(output) == ["billing"]
    assert output["billing"]["apiToken"] == "billing-token"


def test_show_unknown_service(datadir):
    with pytest.raises(CommandError) as excinfo:
        run("show", str(datadir / "discovery.yml"), "unknown")

    assert "Unable to find the configuration for service 'unknown'" in str(
        excinfo.value
    )


def test_validate(datadir, capsys):
    run("validate", str(datadir / "discovery.yml"))

    assert capsys.readouterr().out == "OK (3 service(s))\n"


def test_validate_error(datadir):
    with pytest.raises(CommandError) as excinfo:
        run("validate", str(datadir / "missing_uris.yml"))

    assert "'uris' is a required field (service=search)" in str(excinfo.value)


def test_no_command():
    with pytest.raises(CommandError) as excinfo:
        run("--verbose")

    assert "No command is given" in str(excinfo.value)


def test_unknown_command():
    with pytest.raises(CommandNotFoundError):
        run("up")


def test_version(capsys):
    run("version")

    assert capsys.readouterr().out == f"discovery {__version__}\n"


def test_help(capsys):
    with pytest.raises(SystemExit):
        run("help", "show")

    assert "show prints the effective configuration" in capsys.readouterr().out
