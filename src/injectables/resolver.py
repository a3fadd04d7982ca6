"""Creation of framework-managed objects.

:class:`ObjectResolver` turns a requested type into a ready instance in three steps:

1. construct the concrete type without arguments;
2. assign every field declared ``Annotated[T, Inject]`` on that class from the
   first registered provider supporting ``T``;
3. call every public ``@post_construct`` method, inherited ones included.

Only annotations declared directly on the concrete class are injected; fields
declared on base classes are left alone.
"""

import inspect
import logging
import re
import sys
import types
from typing import Annotated, Any, Optional, TypeVar, Union, get_args, get_origin

from injectables.domain import InjectionPoint
from injectables.errors import AccessError, InstantiationError, LifecycleError
from injectables.framework import FrameworkConfig
from injectables.markers import Inject, is_post_construct
from injectables.providers import InjectableProvider
from injectables.registry import InjectableRegistry

__all__ = ["ObjectResolver", "injection_points"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ObjectResolver:
    """Creates instances, injects framework services into them and runs their hooks.

    One resolver owns one registry. Concurrent ``create`` calls are safe: the only
    shared state is the registry, whose population is exactly-once.

    Args:
        config: The configuration handle passed to every provider.
        registry: The providers to consult; a fresh registry seeded with the built-ins
            on first use if omitted.

    Example:
        >>> resolver = ObjectResolver(config)
        >>> handler = resolver.create(Handler, WebSocketHandler)
    """

    def __init__(self, config: FrameworkConfig, registry: Optional[InjectableRegistry] = None):
        self.config = config
        self.registry = registry if registry is not None else InjectableRegistry()

    def register(self, provider: InjectableProvider) -> "ObjectResolver":
        """Append a provider to this resolver's registry.

        Returns:
            This resolver, so registrations can be chained.
        """
        self.registry.register(provider)
        return self

    def create(self, requested_type: type[T], concrete_type: Optional[type] = None) -> T:
        """Construct, inject and initialise an instance of ``concrete_type``.

        Args:
            requested_type: The type the caller asked for.
            concrete_type: The implementation to construct; must be a subclass of
                ``requested_type`` and constructible without arguments. Defaults to
                ``requested_type``.

        Returns:
            A ready instance of ``concrete_type``.

        Raises:
            InstantiationError: If ``concrete_type`` cannot be constructed.
            AccessError: If a field cannot be assigned or a hook cannot be looked up.
            LifecycleError: If a post-construction hook raises.
            ConfigurationError: If the registry's default providers cannot be loaded.
        """
        if concrete_type is None:
            concrete_type = requested_type

        self.registry.ensure_defaults_loaded()

        instance = self._instantiate(requested_type, concrete_type)
        self._inject_fields(instance, concrete_type)
        self._run_post_construct(instance, concrete_type)

        return instance

    def _instantiate(self, requested_type: type, concrete_type: type) -> Any:
        if not inspect.isclass(concrete_type):
            raise InstantiationError(f"{concrete_type!r} is not a class")
        if inspect.isclass(requested_type) and not _implements(concrete_type, requested_type):
            raise InstantiationError(
                f"{concrete_type.__name__} is not a subclass of {requested_type.__name__}"
            )
        if inspect.isabstract(concrete_type):
            raise InstantiationError(f"{concrete_type.__name__} is abstract")

        try:
            return concrete_type()
        except Exception as e:
            raise InstantiationError(
                f"Cannot construct {concrete_type.__name__}: {e}"
            ) from e

    def _inject_fields(self, instance: Any, concrete_type: type) -> None:
        for point in injection_points(concrete_type):
            # The walk restarts from the first provider for every field.
            provider = self.registry.find(point.declared_type)
            if provider is None:
                logger.debug(
                    f"No provider for {concrete_type.__name__}.{point.name}: "
                    f"{point.declared_type!r}; leaving it unset"
                )
                continue

            value = provider.provide(self.config)
            try:
                setattr(instance, point.name, value)
            except Exception as e:
                raise AccessError(
                    f"Cannot set {concrete_type.__name__}.{point.name}: {e}"
                ) from e
            logger.debug(f"Injected {concrete_type.__name__}.{point.name} from {provider!r}")

    def _run_post_construct(self, instance: Any, concrete_type: type) -> None:
        for name, member in inspect.getmembers(concrete_type):
            if name.startswith("_") or not is_post_construct(member):
                continue

            try:
                hook = getattr(instance, name)
            except AttributeError as e:
                raise AccessError(
                    f"Cannot access {concrete_type.__name__}.{name}: {e}"
                ) from e

            logger.debug(f"Running post-construct hook {concrete_type.__name__}.{name}")
            try:
                hook()
            except Exception as e:
                raise LifecycleError(
                    f"Post-construct hook {concrete_type.__name__}.{name} failed: {e}", e
                ) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.registry)} providers)"


def injection_points(cls: type) -> list[InjectionPoint]:
    """List the fields declared for injection directly on ``cls``, in declaration order.

    String annotations are evaluated one at a time, in the namespace of the class and
    its module. One that cannot be evaluated is skipped unless it names ``Inject``,
    so forward references to names only imported for type checking do not get in
    the way of injection. ``Optional[T]`` and ``T | None`` are matched as ``T``.

    Example:
        >>> class Handler:
        ...     config: Annotated[FrameworkConfig, Inject] = None
        ...     name: str = "handler"
        >>> injection_points(Handler)
        [InjectionPoint(name='config', declared_type=<class 'FrameworkConfig'>)]

    Raises:
        AccessError: If an annotation naming ``Inject`` cannot be evaluated.
    """
    result = []
    for name, annotation in _own_annotations(cls).items():
        if isinstance(annotation, str):
            annotation = _evaluate(cls, name, annotation)
        if get_origin(annotation) is not Annotated:
            continue
        declared_type, *metadata = get_args(annotation)
        if any(m is Inject for m in metadata):
            result.append(InjectionPoint(name, _strip_optional(declared_type)))

    return result


def _implements(concrete_type: type, requested_type: type) -> bool:
    try:
        return issubclass(concrete_type, requested_type)
    except TypeError:
        # Protocols that are not runtime-checkable, or that declare data members,
        # refuse class checks. They are satisfied structurally.
        return getattr(requested_type, "_is_protocol", False) is True


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls)
    except NameError:
        # Lazily evaluated annotations (Python 3.14+) naming an undefined name.
        import annotationlib

        return annotationlib.get_annotations(cls, format=annotationlib.Format.STRING)


def _evaluate(cls: type, name: str, annotation: str) -> Any:
    module = sys.modules.get(cls.__module__)
    module_globals = getattr(module, "__dict__", {})
    try:
        return eval(annotation, module_globals, dict(vars(cls)))
    except Exception as e:
        if re.search(r"\bInject\b", annotation):
            raise AccessError(
                f"Cannot evaluate annotation of {cls.__name__}.{name}: {e}"
            ) from e
        logger.debug(f"Skipping unevaluable annotation {cls.__name__}.{name}: {annotation!r}")
        return annotation


def _strip_optional(declared_type: Any) -> Any:
    if get_origin(declared_type) not in (Union, types.UnionType):
        return declared_type
    members = [a for a in get_args(declared_type) if a is not type(None)]
    return members[0] if len(members) == 1 else declared_type
