from types import SimpleNamespace as Case
import pytest

from discovery.config.error import ConfigError
from discovery.config.security import SecurityConfig


class Test_SecurityConfig:
    def test_defaults(self):
        security = SecurityConfig(trust_store_path="/etc/truststore.jks")

        assert security.trust_store_type == "JKS"
        assert security.key_store_path is None
        assert security.key_store_password is None
        assert security.key_store_type == "JKS"
        assert security.key_store_key_alias is None

    def test_from_dict(self):
        security = SecurityConfig.from_dict(
            {
                "trustStorePath": "/etc/ca.pem",
                "trustStoreType": "pem",
                "keyStorePath": "/etc/keystore.p12",
                "keyStorePassword": "changeit",
                "keyStoreType": "Pkcs12",
                "keyStoreKeyAlias": "server",
            }
        )

        assert security == SecurityConfig(
            trust_store_path="/etc/ca.pem",
            trust_store_type="PEM",
            key_store_path="/etc/keystore.p12",
            key_store_password="changeit",
            key_store_type="PKCS12",
            key_store_key_alias="server",
        )

    def test_init_exception(self):
        """
        Test if SecurityConfig raises exception on malformed inputs.
        """
        cases = [
            Case(input={}, exception="'trustStorePath' is a required field"),
            Case(
                input={"trustStorePath": ""},
                exception="trustStorePath should be a non-empty string",
            ),
            Case(
                input={"trustStorePath": "/ts", "trustStoreType": "PFX"},
                exception="Unsupported store type 'PFX'",
            ),
            Case(
                input={"trustStorePath": "/ts", "keyStoreType": 1},
                exception="store type should be a string",
            ),
            Case(
                input={"trustStorePath": "/ts", "keyStorePath": "/ks"},
                exception="keyStorePath and keyStorePassword should be specified together",
            ),
            Case(
                input={"trustStorePath": "/ts", "keyStorePassword": "secret"},
                exception="keyStorePath and keyStorePassword should be specified together",
            ),
            Case(
                input={"trustStorePath": "/ts", "keyStoreKeyAlias": ""},
                exception="If specified, keyStoreKeyAlias should be a non-empty string",
            ),
            Case(
                input={"trustStorePath": "/ts", "protocols": ["TLSv1.3"]},
                exception="get unexpected field(s) 'protocols'",
            ),
        ]

        for case in cases:
            with pytest.raises(ConfigError) as excinfo:
                SecurityConfig.from_dict(case.input)

            assert case.exception in str(excinfo.value)

    def test_of(self):
        security = SecurityConfig(trust_store_path="/ts")

        assert SecurityConfig.of(None) is None
        assert SecurityConfig.of(security) is security
        assert SecurityConfig.of({"trustStorePath": "/ts"}) == security

    def test_to_dict_by_alias(self):
        security = SecurityConfig(trust_store_path="/ts")

        assert security.to_dict(by_alias=True) == {
            "trustStorePath": "/ts",
            "trustStoreType": "JKS",
            "keyStoreType": "JKS",
        }

    def test_repr_hides_password(self):
        security = SecurityConfig(
            trust_store_path="/ts", key_store_path="/ks", key_store_password="secret"
        )

        assert "secret" not in repr(security)
        assert "key_store_password='<redacted>'" in repr(security)
