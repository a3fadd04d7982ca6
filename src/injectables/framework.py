"""Handles onto the hosting framework's internal services.

The resolver never looks inside these objects. They exist so that fields can be
declared against a stable type, and so that the built-in providers know which
accessor of the configuration handle supplies which service.
"""

from abc import ABC, abstractmethod

__all__ = [
    "Framework",
    "FrameworkConfig",
    "ResourceFactory",
    "ResourceSessionFactory",
    "BroadcasterFactory",
    "MetaBroadcaster",
]


class Framework(ABC):
    """The hosting framework itself."""


class ResourceFactory(ABC):
    """Creates and looks up framework resources."""


class ResourceSessionFactory(ABC):
    """Creates and looks up sessions attached to framework resources."""


class BroadcasterFactory(ABC):
    """Creates and looks up broadcasters."""


class MetaBroadcaster(ABC):
    """Broadcasts across every broadcaster known to the framework."""


class FrameworkConfig(ABC):
    """The live configuration of the hosting framework.

    This is the handle passed to every provider's ``provide`` call. It exposes one
    accessor per built-in provider.
    """

    @abstractmethod
    def framework(self) -> Framework:
        ...

    @abstractmethod
    def resource_factory(self) -> ResourceFactory:
        ...

    @abstractmethod
    def resource_session_factory(self) -> ResourceSessionFactory:
        ...

    @abstractmethod
    def broadcaster_factory(self) -> BroadcasterFactory:
        ...

    @abstractmethod
    def meta_broadcaster(self) -> MetaBroadcaster:
        ...
