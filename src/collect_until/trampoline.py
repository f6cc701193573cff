from abc import ABC
from typing import Any, Callable, Generic, List, TypeVar

from .immutable import Immutable
from .monad import Monad, MonadSequencer

A = TypeVar('A')
B = TypeVar('B')


class Trampoline(Immutable, Monad, Generic[A], ABC):
    """
    Description of a synchronous computation that never fails.
    Building one performs no work; `run` interprets it in a loop, so
    arbitrarily long chains of `and_then` use constant stack depth.

    Example:
        >>> Done(['row1']).map(len).run()
        1
    """
    def and_then(self, f: Callable[[A], 'Trampoline[B]']) -> 'Trampoline[B]':
        return AndThen(self, f)

    def map(self, f: Callable[[A], B]) -> 'Trampoline[B]':
        return self.and_then(lambda a: Done(f(a)))

    def run(self) -> A:
        """
        Interpret this trampoline

        Return:
            the value this trampoline finishes with
        """
        conts: List[Callable[[Any], Trampoline]] = []
        trampoline: Trampoline = self
        while True:
            if isinstance(trampoline, AndThen):
                conts.append(trampoline.cont)
                trampoline = trampoline.sub
            elif isinstance(trampoline, Call):
                trampoline = trampoline.thunk()
            elif conts:
                trampoline = conts.pop()(trampoline.a)
            else:
                return trampoline.a


class Done(Trampoline[A]):
    """
    A finished computation
    """
    a: A


class Call(Trampoline[A]):
    """
    A computation suspended until it is run
    """
    thunk: Callable[[], Trampoline[A]]


class AndThen(Trampoline[B], Generic[A, B]):
    """
    ``sub`` followed by the computation ``cont`` builds from its value
    """
    sub: Trampoline[A]
    cont: Callable[[A], Trampoline[B]]


sequencer = MonadSequencer(Done)
"""
`Sequencer` that lifts values with `Done`. `sequence` only builds
an `AndThen`, so steps run when the result is interpreted with
`Trampoline.run`.
"""

__all__ = ['Trampoline', 'Done', 'Call', 'AndThen', 'sequencer']
