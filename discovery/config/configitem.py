from types import SimpleNamespace
from copy import copy

from .error import ConfigError

__all__ = ("ConfigItem",)


class ConfigItem(SimpleNamespace):
    """A class that is intended to be inherited to subclass
    `types.SimpleNamespace` and provides value transformation and
    validation. Items are read-only once constructed.

    Subclasses declare their fields, the defaults of the optional ones, and
    the keys used for them in config documents:

        class Item(ConfigItem, fields="name,port", defaults=dict(port=0),
                   aliases=dict(port="listenPort")):
            ...

    A `_transform_<field>` hook may convert a value and a `_validate_<field>`
    hook may reject it by raising `ConfigError`.
    """

    __slots__ = ()

    def __init__(self, **kwargs):
        new_kwargs = {}
        for field in self._fields:
            if field in kwargs:
                new_kwargs[field] = kwargs.pop(field)
            elif field in self._defaults:
                new_kwargs[field] = copy(self._defaults.get(field))
            else:
                raise ConfigError(f"'{self._aliases.get(field, field)}' is a required field")

        if kwargs:
            names = ", ".join(kwargs)
            raise ConfigError(
                f"{self.__class__.__name__} get unexpected field(s) '{names}'"
            )

        for field in self._fields:
            value = new_kwargs[field]

            # transform value
            if hasattr(self, f"_transform_{field}"):
                value = getattr(self, f"_transform_{field}")(value)
                new_kwargs[field] = value

            # validate value
            if hasattr(self, f"_validate_{field}"):
                getattr(self, f"_validate_{field}")(value)

        # Call SimpleNamespace.__init__ to set field values.
        super().__init__(**new_kwargs)

        if hasattr(self, "_validate"):
            self._validate()

    def __init_subclass__(cls, fields="", defaults=None, aliases=None, **kwargs):
        super().__init_subclass__(**kwargs)

        # normalize parameters
        if isinstance(fields, str):
            fields = fields.replace(",", " ").split()
        fields = tuple(map(str, fields))

        defaults = defaults or {}
        aliases = aliases or {}

        # ensure all keys in defaults and aliases can be found in fields
        for key in (*defaults, *aliases):
            if key not in fields:
                raise TypeError(f"Key '{key}' not found in field names")

        cls._fields = fields
        cls._defaults = defaults
        cls._aliases = aliases

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def copy(self, **changes):
        kwargs = self.to_dict()
        kwargs.update(changes)
        return self.__class__(**kwargs)

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict):
            raise ConfigError(
                f"{cls.__name__} should be a mapping, got '{type(d).__name__}'"
            )

        # documents only use the aliased key of a field, never its python name
        keys = {cls._aliases.get(field, field): field for field in cls._fields}

        kwargs = {}
        unexpected = []
        for key, value in d.items():
            field = keys.get(key)
            if field is None:
                unexpected.append(str(key))
            else:
                kwargs[field] = value

        if unexpected:
            names = ", ".join(unexpected)
            raise ConfigError(f"{cls.__name__} get unexpected field(s) '{names}'")

        return cls(**kwargs)

    def to_dict(self, by_alias=False):
        if by_alias:
            return {
                self._aliases.get(field, field): getattr(self, field)
                for field in self._fields
            }

        return {field: getattr(self, field) for field in self._fields}

    def __eq__(self, value):
        if self.__class__ != value.__class__:
            return False

        return super().__eq__(value)

    def __hash__(self):
        return hash((self.__class__, *(getattr(self, f) for f in self._fields)))

    def __repr__(self):
        arg_list = ", ".join(f"{k}={getattr(self, k)!r}" for k in self._fields)
        return f"{type(self).__name__}({arg_list})"
