"""
registry holds the configured services and resolves the settings each of
them should actually be reached with.
"""
import logging
from types import MappingProxyType

from .error import ConfigError, ServiceNotFoundError
from .security import SecurityConfig
from .service import ServiceConfig
from .token import BearerToken

__all__ = (
    "RegistryBuilder",
    "ServiceRegistry",
)

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """
    ServiceRegistry maps service names to their `ServiceConfig`, with a
    fallback API token and security profile for services that define none.

    The effective settings are merged once, when the registry is built, and
    the registry never changes afterwards, so it can be shared between
    threads without locking.
    """

    __slots__ = ("default_api_token", "default_security", "_raw_services", "_services")

    def __init__(self, *, default_api_token=None, default_security=None, services=None):
        raw_services = {}
        for name, config in (services or {}).items():
            _validate_name(name)
            try:
                raw_services[name] = ServiceConfig.of(config)
            except ConfigError as e:
                raise ConfigError(e, service=name) from e

        set_ = object.__setattr__
        set_(self, "default_api_token", BearerToken.of(default_api_token))
        set_(self, "default_security", SecurityConfig.of(default_security))
        set_(self, "_raw_services", MappingProxyType(raw_services))
        set_(self, "_services", MappingProxyType(self._merge()))

        logger.debug("Built service registry with %d service(s)", len(self._services))

    def _merge(self):
        services = {}
        for name, raw in self._raw_services.items():
            api_token = raw.api_token
            if api_token is None:
                api_token = self.default_api_token
                if api_token is not None:
                    logger.debug("Service '%s' uses the default API token", name)

            security = raw.security
            if security is None:
                security = self.default_security
                if security is not None:
                    logger.debug("Service '%s' uses the default security", name)

            services[name] = ServiceConfig(
                uris=raw.uris, api_token=api_token, security=security
            )

        return services

    @staticmethod
    def builder():
        return RegistryBuilder()

    @classmethod
    def from_dict(cls, d):
        """Build a registry from a parsed config document:

            {"apiToken": ..., "security": {...}, "services": {name: {...}}}
        """
        if d is None:
            d = {}
        if not isinstance(d, dict):
            raise ConfigError(
                f"Config document should be a mapping, got '{type(d).__name__}'"
            )

        unexpected = [key for key in d if key not in ("apiToken", "security", "services")]
        if unexpected:
            names = ", ".join(map(str, unexpected))
            raise ConfigError(f"Unexpected field(s) '{names}'")

        services = d.get("services")
        if services is None:
            services = {}
        if not isinstance(services, dict):
            raise ConfigError(
                f"services should be a mapping, got '{type(services).__name__}'"
            )

        return cls(
            default_api_token=d.get("apiToken"),
            default_security=d.get("security"),
            services=services,
        )

    def to_dict(self):
        """Return the registry in the shape it was authored in."""
        d = {}
        if self.default_api_token is not None:
            d["apiToken"] = str(self.default_api_token)
        if self.default_security is not None:
            d["security"] = self.default_security.to_dict(by_alias=True)
        d["services"] = {
            name: config.to_dict(by_alias=True)
            for name, config in self._raw_services.items()
        }
        return d

    def get_effective_services(self):
        """Return a read-only mapping of service names to their settings
        with the defaults applied.
        """
        return self._services

    def get_service(self, service_name):
        try:
            return self._services[service_name]
        except (KeyError, TypeError):
            raise ServiceNotFoundError(service_name) from None

    def get_api_token(self, service_name):
        """
        Return the API token of `service_name`, falling back to the default
        API token. Raise ServiceNotFoundError for an unknown service.
        """
        return self.get_service(service_name).api_token

    def get_security(self, service_name):
        """
        Return the security profile of `service_name`, falling back to the
        default security profile. Raise ServiceNotFoundError for an unknown
        service.
        """
        return self.get_service(service_name).security

    def get_uris(self, service_name):
        """Return the URIs of `service_name` as an immutable tuple, `()` for a
        service configured with an empty list. URIs are never defaulted.
        """
        return self.get_service(service_name).uris

    def service_names(self):
        return sorted(self._services)

    def __contains__(self, service_name):
        return service_name in self._services

    def __iter__(self):
        return iter(self._services)

    def __len__(self):
        return len(self._services)

    def __setattr__(self, name, value):
        raise AttributeError("ServiceRegistry is read-only")

    def __eq__(self, other):
        if not isinstance(other, ServiceRegistry):
            return NotImplemented

        return (
            self.default_api_token == other.default_api_token
            and self.default_security == other.default_security
            and dict(self._raw_services) == dict(other._raw_services)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"{type(self).__name__}(default_api_token={self.default_api_token!r}, "
            f"default_security={self.default_security!r}, "
            f"services={dict(self._raw_services)!r})"
        )


class RegistryBuilder:
    """Collects defaults and services, then builds a `ServiceRegistry`.

        registry = (
            ServiceRegistry.builder()
            .default_api_token("token")
            .service("search", dict(uris=["https://search:8443"]))
            .build()
        )
    """

    def __init__(self):
        self._default_api_token = None
        self._default_security = None
        self._services = {}

    def default_api_token(self, api_token):
        self._default_api_token = api_token
        return self

    def default_security(self, security):
        self._default_security = security
        return self

    def services(self, services):
        for name in services:
            _validate_name(name)
        self._services = dict(services)
        return self

    def service(self, name, config):
        _validate_name(name)
        if name in self._services:
            raise ConfigError(f"Duplicate service name '{name}' found")

        self._services[name] = config
        return self

    def from_registry(self, registry):
        self._default_api_token = registry.default_api_token
        self._default_security = registry.default_security
        self._services = dict(registry._raw_services)
        return self

    def build(self):
        return ServiceRegistry(
            default_api_token=self._default_api_token,
            default_security=self._default_security,
            services=self._services,
        )


def _validate_name(name):
    if isinstance(name, str) and name != "":
        return

    raise ConfigError(f"Service name should be a non-empty string, got {name!r}")
