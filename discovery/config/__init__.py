from .error import ConfigError, ServiceNotFoundError
from .token import BearerToken
from .security import SecurityConfig
from .service import ServiceConfig
from .registry import RegistryBuilder, ServiceRegistry
from .parser import load, loads, load_path, dumps

__all__ = (
    "BearerToken",
    "ConfigError",
    "RegistryBuilder",
    "SecurityConfig",
    "ServiceConfig",
    "ServiceNotFoundError",
    "ServiceRegistry",
    "dumps",
    "load",
    "load_path",
    "loads",
)
