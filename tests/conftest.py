import pytest

from injectables.framework import (
    BroadcasterFactory,
    Framework,
    FrameworkConfig,
    MetaBroadcaster,
    ResourceFactory,
    ResourceSessionFactory,
)
from injectables.registry import InjectableRegistry
from injectables.resolver import ObjectResolver


class StubFramework(Framework):
    pass


class StubResourceFactory(ResourceFactory):
    pass


class StubResourceSessionFactory(ResourceSessionFactory):
    pass


class StubBroadcasterFactory(BroadcasterFactory):
    pass


class StubMetaBroadcaster(MetaBroadcaster):
    pass


class StubConfig(FrameworkConfig):
    def __init__(self):
        self.the_framework = StubFramework()
        self.the_resource_factory = StubResourceFactory()
        self.the_resource_session_factory = StubResourceSessionFactory()
        self.the_broadcaster_factory = StubBroadcasterFactory()
        self.the_meta_broadcaster = StubMetaBroadcaster()

    def framework(self):
        return self.the_framework

    def resource_factory(self):
        return self.the_resource_factory

    def resource_session_factory(self):
        return self.the_resource_session_factory

    def broadcaster_factory(self):
        return self.the_broadcaster_factory

    def meta_broadcaster(self):
        return self.the_meta_broadcaster


@pytest.fixture
def config() -> StubConfig:
    return StubConfig()


@pytest.fixture
def registry() -> InjectableRegistry:
    return InjectableRegistry()


@pytest.fixture
def resolver(config, registry) -> ObjectResolver:
    return ObjectResolver(config, registry)
