"""
parser loads service discovery config documents (YAML, or JSON as its
subset) into a ServiceRegistry.
"""
import io
import logging
from pathlib import Path

import ruamel.yaml as yaml
from ruamel.yaml.constructor import DuplicateKeyError
from ruamel.yaml.error import YAMLError

from .error import ConfigError
from .registry import ServiceRegistry

__all__ = (
    "load",
    "loads",
    "load_path",
    "dumps",
    "dump_obj",
    "ConfigError",
)

logger = logging.getLogger(__name__)


def loads(content, file=""):
    """Build a ServiceRegistry from the text of a config document. `file` is
    only used to annotate errors.
    """
    obj = _load_obj(content, file)

    try:
        return ServiceRegistry.from_dict(obj)
    except ConfigError as e:
        raise ConfigError(e, file=file) from e


def load(f, file=""):
    return loads(f.read(), file=file or getattr(f, "name", ""))


def load_path(path):
    path = Path(path)
    file = str(path.resolve())
    logger.debug("Loading service discovery config from %s", file)

    try:
        with path.open() as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e.strerror}", file=file) from e

    return loads(content, file=file)


def dumps(registry):
    return dump_obj(registry.to_dict())


def dump_obj(obj):
    stream = io.StringIO()
    yaml.YAML().dump(obj, stream)
    return stream.getvalue()


def _load_obj(s, file):
    try:
        return yaml.YAML(typ="safe").load(s)
    except DuplicateKeyError as e:
        raise ConfigError(f"Duplicate key found: {e.problem}", file=file) from e
    except YAMLError as e:
        raise ConfigError(f"Invalid config document:\n{e}", file=file) from e
