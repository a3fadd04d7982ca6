"""Markers read by the resolver when preparing a requested object.

Fields opt in to injection by carrying ``Inject`` in their ``Annotated`` metadata:

    >>> class Handler:
    ...     config: Annotated[FrameworkConfig, Inject] = None

The declared type is matched against providers as a class; ``Optional[T]`` and
``T | None`` are matched as ``T``.

Methods opt in to post-construction execution with ``@post_construct``:

    >>> class Handler:
    ...     @post_construct
    ...     def start(self):
    ...         ...
"""

from typing import Any, Callable

__all__ = ["Inject", "post_construct", "is_post_construct"]


class _InjectMarker:
    def __repr__(self) -> str:
        return "Inject"


Inject = _InjectMarker()

_POST_CONSTRUCT_ATTRIBUTE = "__post_construct__"


def post_construct(func: Callable) -> Callable:
    """Mark a method to be called, without arguments, once injection is complete."""
    setattr(func, _POST_CONSTRUCT_ATTRIBUTE, True)
    return func


def is_post_construct(member: Any) -> bool:
    return callable(member) and getattr(member, _POST_CONSTRUCT_ATTRIBUTE, False) is True
