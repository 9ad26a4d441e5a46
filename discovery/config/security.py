"""
security describes the transport security profile (trust store and key
store references) used to reach a service.
"""
from .configitem import ConfigItem
from .error import ConfigError

__all__ = (
    "STORE_TYPES",
    "SecurityConfig",
)


STORE_TYPES = ("JKS", "PKCS12", "PEM", "PUPPET")


def _transform_store_type(store_type):
    if not isinstance(store_type, str):
        raise ConfigError("store type should be a string")

    store_type = store_type.upper()
    if store_type not in STORE_TYPES:
        raise ConfigError(
            f"Unsupported store type '{store_type}', "
            f"expected one of {', '.join(STORE_TYPES)}"
        )
    return store_type


def _validate_optional_string(name):
    def validate(value):
        if value is None or (isinstance(value, str) and value != ""):
            return

        raise ConfigError(f"If specified, {name} should be a non-empty string")

    return staticmethod(validate)


class SecurityConfig(
    ConfigItem,
    fields=(
        "trust_store_path,trust_store_type,"
        "key_store_path,key_store_password,key_store_type,key_store_key_alias"
    ),
    defaults=dict(
        trust_store_type="JKS",
        key_store_path=None,
        key_store_password=None,
        key_store_type="JKS",
        key_store_key_alias=None,
    ),
    aliases=dict(
        trust_store_path="trustStorePath",
        trust_store_type="trustStoreType",
        key_store_path="keyStorePath",
        key_store_password="keyStorePassword",
        key_store_type="keyStoreType",
        key_store_key_alias="keyStoreKeyAlias",
    ),
):
    """A transport security profile. The merge treats it as an opaque
    value; only its own shape is checked here.
    """

    _transform_trust_store_type = staticmethod(_transform_store_type)
    _transform_key_store_type = staticmethod(_transform_store_type)
    _validate_key_store_path = _validate_optional_string("keyStorePath")
    _validate_key_store_password = _validate_optional_string("keyStorePassword")
    _validate_key_store_key_alias = _validate_optional_string("keyStoreKeyAlias")

    @staticmethod
    def _validate_trust_store_path(path):
        if isinstance(path, str) and path != "":
            return

        raise ConfigError("trustStorePath should be a non-empty string")

    def _validate(self):
        if (self.key_store_path is None) != (self.key_store_password is None):
            raise ConfigError(
                "keyStorePath and keyStorePassword should be specified together"
            )

    @classmethod
    def of(cls, value):
        """Return `value` as a SecurityConfig, or None if it is None."""
        if value is None or isinstance(value, cls):
            return value
        return cls.from_dict(value)

    def to_dict(self, by_alias=False):
        d = super().to_dict(by_alias=by_alias)
        if by_alias:
            return {k: v for k, v in d.items() if v is not None}
        return d

    def __repr__(self):
        # keep the key store password out of logs
        fields = self.to_dict()
        if fields["key_store_password"] is not None:
            fields["key_store_password"] = "<redacted>"
        arg_list = ", ".join(f"{k}={v!r}" for k, v in fields.items())
        return f"{type(self).__name__}({arg_list})"
