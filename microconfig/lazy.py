"""
Deferred configuration values.

A LazyValue wraps a zero-argument producer. The producer runs every time the
value is retrieved through `get`; results are never cached.
"""

from typing import Any, Callable, Generic, TypeVar

V = TypeVar('V')


class LazyValue(Generic[V]):
    """Configuration value computed on retrieval."""

    __slots__ = ('_producer',)

    def __init__(self, producer: Callable[[], V]):
        if not callable(producer):
            raise TypeError(f"LazyValue producer must be callable, got {type(producer).__name__}")
        self._producer = producer

    def invoke(self) -> V:
        """Run the producer and return its result."""
        return self._producer()

    __call__ = invoke

    def __repr__(self) -> str:
        name = getattr(self._producer, '__qualname__', type(self._producer).__name__)
        return f"LazyValue({name})"


def lazy(producer: Callable[[], Any]) -> LazyValue:
    """Wrap `producer` so that it is evaluated when the value is retrieved."""
    return LazyValue(producer)
