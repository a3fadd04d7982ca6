"""Injectables: field injection of framework services.

Injectables hands out uniformly constructed objects to a hosting framework's
extension points. A requested type is constructed without arguments, fields
declared ``Annotated[T, Inject]`` on it are filled in from the first registered
provider supporting ``T``, and its ``@post_construct`` methods are run. There is
exactly one creation pattern: no dependency graphs, scopes or constructor injection.

Key Features:
    - Declarative injection points using standard ``Annotated`` type hints
    - Ordered, first-match provider registry seeded with the framework's services
    - Post-construction hooks run after injection, fail-fast
    - Thread-safe, exactly-once registry population

Basic Usage:
    >>> from typing import Annotated
    >>> from injectables import Inject, ObjectResolver, post_construct
    >>> from injectables.framework import BroadcasterFactory
    >>>
    >>> class Handler:
    ...     broadcasters: Annotated[BroadcasterFactory, Inject] = None
    ...
    ...     @post_construct
    ...     def start(self):
    ...         self.broadcasters.lookup("/chat")
    >>>
    >>> resolver = ObjectResolver(config)
    >>> handler = resolver.create(Handler)

The package consists of several modules:
    - resolver: Object creation, field injection and hook execution
    - registry: The ordered provider registry
    - providers: The provider contract and the built-in providers
    - markers: ``Inject`` and ``post_construct``
    - framework: Abstract handles onto the hosting framework's services
    - domain: Core domain models (InjectionPoint)
    - errors: Framework-specific exceptions
"""

from injectables.errors import (
    AccessError,
    ConfigurationError,
    InjectionError,
    InstantiationError,
    LifecycleError,
)
from injectables.markers import Inject, post_construct
from injectables.providers import FunctionInjectable, InjectableProvider, TypeInjectable
from injectables.registry import InjectableRegistry
from injectables.resolver import ObjectResolver

__all__ = [
    "AccessError",
    "ConfigurationError",
    "FunctionInjectable",
    "Inject",
    "InjectableProvider",
    "InjectableRegistry",
    "InjectionError",
    "InstantiationError",
    "LifecycleError",
    "ObjectResolver",
    "TypeInjectable",
    "post_construct",
]
