from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .combiner import Combiner
from .functions import Thunk
from .immutable import Immutable
from .monad import Monad, MonadSequencer

A = TypeVar('A', covariant=True)
B = TypeVar('B')


class Just(Immutable, Monad, Generic[A]):
    """
    A value that is present, e.g a continuation token

    Example:
        >>> Just(2).map(lambda page: page + 1)
        Just(3)
    """
    get: A

    def map(self, f: Callable[[A], B]) -> Maybe[B]:
        return Just(f(self.get))

    def and_then(self, f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return f(self.get)

    def __bool__(self) -> bool:
        return True

    def __repr__(self):
        return f'Just({self.get!r})'


class Nothing(Immutable, Monad):
    """
    An absent value. As the token produced by a step it ends
    `collect_until`; as an effect it is a failure without a reason.
    """
    def map(self, f: Callable[[Any], Any]) -> Nothing:
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Nothing:
        return self

    def __bool__(self) -> bool:
        return False

    def __repr__(self):
        return 'Nothing()'


Maybe = Union[Nothing, Just[A]]
"""
Type-alias for `Union[Nothing, Just[A]]`
"""


def from_optional(optional: Optional[A]) -> Maybe[A]:
    """
    Turn a value that may be `None` into a `Maybe`. Only `None` is
    absent; other falsy values such as ``0`` are wrapped in `Just`.

    Example:
        >>> from_optional(0)
        Just(0)
        >>> from_optional(None)
        Nothing()
    """
    if optional is None:
        return Nothing()
    return Just(optional)


class MaybeCombiner(Combiner):
    """
    `Combiner` that keeps the first `Just`. The right hand side
    is only produced when the left hand side is `Nothing`.

    Example:
        >>> combiner.combine(Just('cached'), lambda: Just('fetched'))
        Just('cached')
        >>> combiner.combine(Nothing(), lambda: Just('fetched'))
        Just('fetched')
    """
    def combine(self, x: Maybe[A], y: Thunk[Maybe[A]]) -> Maybe[A]:
        if isinstance(x, Just):
            return x
        return y()


sequencer = MonadSequencer(Just)
"""
`Sequencer` that lifts values with `Just` and fails with `Nothing`
"""

combiner = MaybeCombiner()

__all__ = [
    'Maybe',
    'Just',
    'Nothing',
    'from_optional',
    'MaybeCombiner',
    'sequencer',
    'combiner'
]
