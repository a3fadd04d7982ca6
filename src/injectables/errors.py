__all__ = [
    "InjectionError",
    "InstantiationError",
    "AccessError",
    "LifecycleError",
    "ConfigurationError",
]


class InjectionError(Exception):
    """Base class for every error raised while preparing a requested object."""

    pass


class InstantiationError(InjectionError):
    """Raised when the concrete type cannot be constructed without arguments."""

    pass


class AccessError(InjectionError):
    """Raised when an injectable field cannot be set or a hook cannot be looked up."""

    pass


class LifecycleError(InjectionError):
    """Raised when a post-construction hook fails.

    Attributes:
        cause: The exception raised by the hook.
    """

    def __init__(self, message: str, cause: BaseException):
        super().__init__(message)
        self.cause = cause


class ConfigurationError(InjectionError):
    """Raised when the provider registry cannot be populated or is misused."""

    pass
