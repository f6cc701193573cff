from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar, Union

from .immutable import Immutable
from .monad import Monad, MonadSequencer

A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)
C = TypeVar('C')


class Right(Immutable, Monad, Generic[A]):
    """
    Successful result of a synchronous computation that can fail

    Example:
        >>> Right(['row1']).map(len)
        Right(1)
        >>> Right(1).and_then(lambda page: Left(f'invalid page {page}'))
        Left('invalid page 1')
        >>> 'success' if Right(1) else 'failure'
        'success'
    """
    get: A

    def map(self, f: Callable[[A], C]) -> Either[Any, C]:
        return Right(f(self.get))

    def and_then(self, f: Callable[[A], Either[B, C]]) -> Either[B, C]:
        return f(self.get)

    def __bool__(self) -> bool:
        return True

    def __repr__(self):
        return f'Right({self.get!r})'


class Left(Immutable, Monad, Generic[B]):
    """
    Failed result of a synchronous computation. `map` and `and_then`
    return the failure unchanged without calling their argument.

    Example:
        >>> Left('invalid page').map(len)
        Left('invalid page')
        >>> 'success' if Left('invalid page') else 'failure'
        'failure'
    """
    get: B

    def map(self, f: Callable[[Any], C]) -> Either[B, C]:
        return self

    def and_then(self, f: Callable[[Any], Either[B, C]]) -> Either[B, C]:
        return self

    def __bool__(self) -> bool:
        return False

    def __repr__(self):
        return f'Left({self.get!r})'


Either = Union[Left[B], Right[A]]
"""
Type-alias for `Union[Left[B], Right[A]]`
"""

sequencer = MonadSequencer(Right)
"""
`Sequencer` that fails with `Left` and lifts values with `Right`.
Steps run as soon as they are sequenced.
"""

__all__ = ['Either', 'Left', 'Right', 'sequencer']
