import pytest

from injectables.framework import (
    BroadcasterFactory,
    Framework,
    FrameworkConfig,
    MetaBroadcaster,
    ResourceFactory,
    ResourceSessionFactory,
)
from injectables.providers import (
    DEFAULT_INJECTABLES,
    BroadcasterFactoryInjectable,
    FrameworkConfigInjectable,
    FrameworkInjectable,
    FunctionInjectable,
    MetaBroadcasterInjectable,
    ResourceFactoryInjectable,
    ResourceSessionFactoryInjectable,
)


class Clock:
    pass


class SystemClock(Clock):
    pass


def test_default_providers_are_declared_in_fixed_order():
    assert DEFAULT_INJECTABLES == (
        FrameworkConfigInjectable,
        FrameworkInjectable,
        ResourceFactoryInjectable,
        ResourceSessionFactoryInjectable,
        BroadcasterFactoryInjectable,
        MetaBroadcasterInjectable,
    )


@pytest.mark.parametrize(
    "provider_class, service_type, expected",
    [
        (FrameworkConfigInjectable, FrameworkConfig, lambda c: c),
        (FrameworkInjectable, Framework, lambda c: c.the_framework),
        (ResourceFactoryInjectable, ResourceFactory, lambda c: c.the_resource_factory),
        (
            ResourceSessionFactoryInjectable,
            ResourceSessionFactory,
            lambda c: c.the_resource_session_factory,
        ),
        (BroadcasterFactoryInjectable, BroadcasterFactory, lambda c: c.the_broadcaster_factory),
        (MetaBroadcasterInjectable, MetaBroadcaster, lambda c: c.the_meta_broadcaster),
    ],
)
def test_default_provider_supplies_its_service(config, provider_class, service_type, expected):
    provider = provider_class()

    assert provider.supports(service_type)
    assert provider.provide(config) is expected(config)


def test_default_providers_recognise_only_their_own_type():
    for provider_class in DEFAULT_INJECTABLES:
        provider = provider_class()
        supported = [
            t for t in (c.supported_type for c in DEFAULT_INJECTABLES) if provider.supports(t)
        ]
        assert supported == [provider_class.supported_type]


def test_type_provider_supports_subclasses_but_not_unrelated_types(config):
    provider = FrameworkConfigInjectable()

    assert provider.supports(type(config))
    assert not provider.supports(Clock)
    assert not provider.supports("FrameworkConfig")
    assert not provider.supports(None)


def test_function_provider_calls_function_with_config(config):
    provider = FunctionInjectable(Clock, lambda c: (SystemClock(), c))

    clock, passed_config = provider.provide(config)

    assert isinstance(clock, SystemClock)
    assert passed_config is config
    assert provider.supports(SystemClock)
    assert not provider.supports(Framework)


def test_function_provider_requires_a_class():
    with pytest.raises(TypeError, match="is not a class"):
        FunctionInjectable("Clock", lambda c: None)
