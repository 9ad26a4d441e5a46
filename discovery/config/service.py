from .configitem import ConfigItem
from .error import ConfigError
from .security import SecurityConfig
from .token import BearerToken

__all__ = ("ServiceConfig",)


class ServiceConfig(
    ConfigItem,
    fields="uris,api_token,security",
    defaults=dict(api_token=None, security=None),
    aliases=dict(api_token="apiToken"),
):
    """Connection settings of a single service: the URIs to reach it, and
    optionally its own API token and security profile.

    The same type holds both what was authored and the effective settings
    after the registry defaults are applied.
    """

    @staticmethod
    def _transform_uris(uris):
        if uris is None:
            raise ConfigError("uris cannot be null")
        if not isinstance(uris, (list, tuple)):
            raise ConfigError(
                f"uris should be a sequence, got '{type(uris).__name__}'"
            )

        for uri in uris:
            if not isinstance(uri, str):
                raise ConfigError(f"uris.item should be a string, got {uri!r}")

        return tuple(uris)

    _transform_api_token = staticmethod(BearerToken.of)
    _transform_security = staticmethod(SecurityConfig.of)

    @classmethod
    def of(cls, value):
        if isinstance(value, cls):
            return value
        return cls.from_dict(value)

    def to_dict(self, by_alias=False):
        if not by_alias:
            return super().to_dict()

        # the authored shape: plain values, absent fields left out
        d = {"uris": list(self.uris)}
        if self.api_token is not None:
            d["apiToken"] = str(self.api_token)
        if self.security is not None:
            d["security"] = self.security.to_dict(by_alias=True)
        return d
