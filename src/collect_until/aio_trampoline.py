from abc import ABC
from inspect import isawaitable
from typing import Any, Awaitable, Callable, Generic, List, TypeVar, Union

from .immutable import Immutable
from .monad import Monad

A = TypeVar('A')
B = TypeVar('B')

MaybeAwaitable = Union[Awaitable[A], A]


class Trampoline(Immutable, Monad, Generic[A], ABC):
    """
    Asynchronous counterpart of `collect_until.trampoline.Trampoline`.
    `Call` thunks are coroutine functions, and continuations may return
    awaitables. `collect_until.effect.Effect` is interpreted with it.
    """
    def and_then(
        self, f: Callable[[A], MaybeAwaitable['Trampoline[B]']]
    ) -> 'Trampoline[B]':
        return AndThen(self, f)

    def map(self, f: Callable[[A], B]) -> 'Trampoline[B]':
        return self.and_then(lambda a: Done(f(a)))

    async def run(self) -> A:
        conts: List[Callable[[Any], Any]] = []
        trampoline: Trampoline = self
        while True:
            if isinstance(trampoline, AndThen):
                conts.append(trampoline.cont)
                trampoline = trampoline.sub
            elif isinstance(trampoline, Call):
                trampoline = await trampoline.thunk()
            elif conts:
                trampoline = conts.pop()(trampoline.a)
                if isawaitable(trampoline):
                    trampoline = await trampoline
            else:
                return trampoline.a


class Done(Trampoline[A]):
    a: A


class Call(Trampoline[A]):
    thunk: Callable[[], Awaitable[Trampoline[A]]]


class AndThen(Trampoline[B], Generic[A, B]):
    sub: Trampoline[A]
    cont: Callable[[A], MaybeAwaitable[Trampoline[B]]]


__all__ = ['Trampoline', 'Done', 'Call', 'AndThen']
