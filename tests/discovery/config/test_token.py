import pytest

from discovery.config.error import ConfigError
from discovery.config.token import BearerToken


class Test_BearerToken:
    def test_init(self):
        token = BearerToken("abc.DEF-123_~+/==")

        assert str(token) == "abc.DEF-123_~+/=="
        assert token.value == "abc.DEF-123_~+/=="

    def test_invalid(self):
        for value in ["", "has space", "trailing\n", "a=b", True, 1.5, None]:
            with pytest.raises(ConfigError):
                BearerToken(value)

    def test_int_scalar(self):
        """
        Test if an all-digit token typed as an int by YAML is kept as text.
        """
        assert BearerToken(12345) == BearerToken("12345")
        assert str(BearerToken(12345)) == "12345"

    def test_of(self):
        token = BearerToken("abc")

        assert BearerToken.of(None) is None
        assert BearerToken.of(token) is token
        assert BearerToken.of("abc") == token

    def test_repr_hides_value(self):
        assert "abc" not in repr(BearerToken("abc"))

    def test_eq_and_hash(self):
        assert BearerToken("abc") == BearerToken("abc")
        assert BearerToken("abc") != BearerToken("abd")
        assert BearerToken("abc") != "abc"
        assert len({BearerToken("abc"), BearerToken("abc")}) == 1

    def test_read_only(self):
        token = BearerToken("abc")

        with pytest.raises(AttributeError):
            token.value = "other"
