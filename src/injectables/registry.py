"""Ordered registry of injectable providers."""

import inspect
import logging
import threading
from typing import Any, Callable, Iterable, Iterator, Optional, get_type_hints

from injectables.errors import ConfigurationError
from injectables.providers import (
    DEFAULT_INJECTABLES,
    FunctionInjectable,
    InjectableProvider,
)

__all__ = ["InjectableRegistry"]

logger = logging.getLogger(__name__)


class InjectableRegistry:
    """Ordered collection of providers, consulted first-match.

    The registry seeds itself with the built-in providers the first time
    :meth:`ensure_defaults_loaded` finds it empty. Further providers are appended
    with :meth:`register` or the :meth:`provides` decorator; nothing is ever removed.
    Registering a capability twice creates two entries and the earlier one always wins.

    Seeding only happens while the registry is empty: providers registered before
    first use replace the built-ins entirely. Call :meth:`ensure_defaults_loaded`
    before registering to keep them.

    Args:
        defaults: Provider classes constructed, without arguments, when the registry
            is first populated. Defaults to the six built-in providers.

    Example:
        >>> registry = InjectableRegistry()
        >>> registry.register(ClockInjectable()).register(MetricsInjectable())
        >>>
        >>> @registry.provides(Clock)
        ... def make_clock(config):
        ...     return SystemClock()
    """

    def __init__(self, defaults: Iterable[type[InjectableProvider]] = DEFAULT_INJECTABLES):
        self._defaults = tuple(defaults)
        self._providers: tuple[InjectableProvider, ...] = ()
        self._lock = threading.Lock()

    def ensure_defaults_loaded(self) -> None:
        """Populate the registry with the default providers if it is empty.

        Idempotent, and exactly-once under concurrent callers. If a default provider
        fails to construct, nothing is appended and the next call tries again.

        Raises:
            ConfigurationError: If a default provider cannot be constructed.
        """
        if self._providers:
            return

        with self._lock:
            if self._providers:
                return

            defaults = []
            for provider_class in self._defaults:
                try:
                    defaults.append(provider_class())
                except Exception as e:
                    raise ConfigurationError(
                        f"Cannot construct default provider {provider_class.__name__}: {e}"
                    ) from e

            self._providers = tuple(defaults)
            logger.debug(f"Loaded default providers: {self._providers}")

    def register(self, provider: InjectableProvider) -> "InjectableRegistry":
        """Append a provider after every provider already registered.

        Args:
            provider: The provider to append.

        Returns:
            This registry, so registrations can be chained.

        Raises:
            ConfigurationError: If ``provider`` is not an InjectableProvider.
        """
        if not isinstance(provider, InjectableProvider):
            raise ConfigurationError(f"{provider!r} is not an InjectableProvider")

        with self._lock:
            self._providers = self._providers + (provider,)

        logger.debug(f"Registered provider: {provider!r}")
        return self

    def provides(self, supported_type: Optional[type] = None) -> Callable:
        """Decorator to register a function of the configuration handle as a provider.

        Args:
            supported_type: The type the function supplies; defaults to the function's
                return annotation.

        Returns:
            A decorator that registers the function and returns it unchanged.

        Example:
            @registry.provides()
            def make_clock(config: FrameworkConfig) -> Clock:
                return SystemClock()
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            provided_type = supported_type or get_type_hints(func).get("return", None)
            if not inspect.isclass(provided_type):
                raise ConfigurationError(
                    f"Function {func.__name__} is decorated with @provides "
                    "but neither names a type nor has a class as return annotation"
                )
            self.register(FunctionInjectable(provided_type, func))
            return func

        return decorator

    def providers(self) -> tuple[InjectableProvider, ...]:
        """Snapshot of the registered providers, in registration order."""
        return self._providers

    def find(self, candidate_type: Any) -> Optional[InjectableProvider]:
        """Return the first provider supporting ``candidate_type``, or None."""
        return next(
            (p for p in self._providers if p.supports(candidate_type)),
            None,
        )

    def __iter__(self) -> Iterator[InjectableProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)
