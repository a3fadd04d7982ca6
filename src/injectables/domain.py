"""Domain models used throughout the resolver."""

from dataclasses import dataclass
from typing import Any

__all__ = ["InjectionPoint"]


@dataclass(frozen=True)
class InjectionPoint:
    """A field declared for injection on a concrete class.

    Attributes:
        name: The attribute name the provided value is assigned to.
        declared_type: The type providers are matched against.
    """

    name: str
    declared_type: Any
