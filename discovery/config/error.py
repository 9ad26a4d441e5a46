from types import SimpleNamespace

__all__ = (
    "ConfigError",
    "ServiceNotFoundError",
)


class ConfigError(Exception):
    def __init__(self, reason, **meta):
        self.meta = SimpleNamespace(**meta)

        super().__init__(reason)

    def __str__(self):
        if self.meta.__dict__:
            meta = ", ".join(
                f"{k}={v}" for k, v in self.meta.__dict__.items() if bool(v)
            )
            if meta:
                return f"{super().__str__()} ({meta})"

        return super().__str__()


class ServiceNotFoundError(ConfigError, LookupError):
    """Raised when a service name is looked up but never configured."""

    def __init__(self, service_name, **meta):
        self.service_name = service_name

        super().__init__(
            f"Unable to find the configuration for service '{service_name}'", **meta
        )
