"""Injectable providers: capability objects that supply values for injectable fields.

A provider answers two questions: whether it can supply a field declared with a
given type (``supports``), and what value to supply given the framework's
configuration handle (``provide``). The built-in providers each wrap exactly one
service exposed by :class:`~injectables.framework.FrameworkConfig`.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable

from injectables.framework import (
    BroadcasterFactory,
    Framework,
    FrameworkConfig,
    MetaBroadcaster,
    ResourceFactory,
    ResourceSessionFactory,
)

__all__ = [
    "InjectableProvider",
    "TypeInjectable",
    "FunctionInjectable",
    "FrameworkConfigInjectable",
    "FrameworkInjectable",
    "ResourceFactoryInjectable",
    "ResourceSessionFactoryInjectable",
    "BroadcasterFactoryInjectable",
    "MetaBroadcasterInjectable",
    "DEFAULT_INJECTABLES",
]


class InjectableProvider(ABC):
    """Supplies values for fields of the type(s) it supports."""

    @abstractmethod
    def supports(self, candidate_type: Any) -> bool:
        """Return True if this provider can supply a field declared as ``candidate_type``."""

    @abstractmethod
    def provide(self, config: FrameworkConfig) -> Any:
        """Produce the value to inject."""


class TypeInjectable(InjectableProvider):
    """Provider recognising one fixed type and its subclasses.

    Subclasses set ``supported_type`` and implement ``provide``.
    """

    supported_type: type = object

    def supports(self, candidate_type: Any) -> bool:
        return inspect.isclass(candidate_type) and issubclass(
            candidate_type, self.supported_type
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.supported_type.__name__})"


class FunctionInjectable(TypeInjectable):
    """Provider backed by a plain function taking the configuration handle.

    Example:
        >>> FunctionInjectable(Clock, lambda config: SystemClock())
    """

    def __init__(self, supported_type: type, func: Callable[[FrameworkConfig], Any]):
        if not inspect.isclass(supported_type):
            raise TypeError(f"{supported_type!r} is not a class")
        self.supported_type = supported_type
        self.func = func

    def provide(self, config: FrameworkConfig) -> Any:
        return self.func(config)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.supported_type.__name__}, "
            f"{getattr(self.func, '__name__', self.func)!r})"
        )


class FrameworkConfigInjectable(TypeInjectable):
    supported_type = FrameworkConfig

    def provide(self, config: FrameworkConfig) -> FrameworkConfig:
        return config


class FrameworkInjectable(TypeInjectable):
    supported_type = Framework

    def provide(self, config: FrameworkConfig) -> Framework:
        return config.framework()


class ResourceFactoryInjectable(TypeInjectable):
    supported_type = ResourceFactory

    def provide(self, config: FrameworkConfig) -> ResourceFactory:
        return config.resource_factory()


class ResourceSessionFactoryInjectable(TypeInjectable):
    supported_type = ResourceSessionFactory

    def provide(self, config: FrameworkConfig) -> ResourceSessionFactory:
        return config.resource_session_factory()


class BroadcasterFactoryInjectable(TypeInjectable):
    supported_type = BroadcasterFactory

    def provide(self, config: FrameworkConfig) -> BroadcasterFactory:
        return config.broadcaster_factory()


class MetaBroadcasterInjectable(TypeInjectable):
    supported_type = MetaBroadcaster

    def provide(self, config: FrameworkConfig) -> MetaBroadcaster:
        return config.meta_broadcaster()


# Order matters: population appends these in sequence and lookup is first-match.
DEFAULT_INJECTABLES: tuple[type[InjectableProvider], ...] = (
    FrameworkConfigInjectable,
    FrameworkInjectable,
    ResourceFactoryInjectable,
    ResourceSessionFactoryInjectable,
    BroadcasterFactoryInjectable,
    MetaBroadcasterInjectable,
)
