from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

from .immutable import Immutable

if TYPE_CHECKING:
    from .either import Either


class Monad(ABC):
    """
    Base class for effect types that can chain dependent computations
    """
    @abstractmethod
    def and_then(self, f: Callable[[Any], Any]) -> Monad:
        pass

    @abstractmethod
    def map(self, f: Callable[[Any], Any]) -> Monad:
        pass


# PEP484 has no higher-kinded type variables, so sequencers are typed
# with `Any` for the effect type.


class Sequencer(Immutable, ABC):
    """
    Capability for ordering effectful steps. Implementations supply
    `lift` and `sequence`; `map` and `tail_rec` are derived from those
    two.

    Implementations must satisfy left identity, i.e
    ``sequence(lift(x), f) == f(x)``, must call ``f`` in
    ``sequence(m, f)`` at most once, and must not call it at all if ``m``
    represents a failure.
    """
    @abstractmethod
    def lift(self, value: Any) -> Any:
        """
        Wrap ``value`` in the effect without performing any effects
        """
        raise NotImplementedError()

    @abstractmethod
    def sequence(self, m: Any, f: Callable[[Any], Any]) -> Any:
        """
        Run the effect ``m``, then the effect produced by applying ``f``
        to its result
        """
        raise NotImplementedError()

    def map(self, m: Any, f: Callable[[Any], Any]) -> Any:
        return self.sequence(m, lambda a: self.lift(f(a)))

    def tail_rec(self, f: Callable[[Any], Any], a: Any) -> Any:
        """
        Run the recursive effectful function ``f`` by calling it with
        the value of each `Left` it produces until it produces a `Right`.

        Eager effects call the continuation given to `sequence` before
        `sequence` returns. Their recursion is unrolled into a loop.
        Lazy effects call it later, when they are interpreted, and recurse
        from inside their own interpreter.

        Example:
            >>> from collect_until.either import Left, Right
            >>> s = MonadSequencer(Right)
            >>> s.tail_rec(lambda n: Right(Left(n - 1) if n else Right(n)),
            ...            10000)
            Right(0)

        Args:
            f: Function producing an effect of `Either`
            a: initial argument to ``f``
        Return:
            Effect producing the value wrapped by the first `Right`
        """
        while True:
            unrolled = []
            returned = False

            def cont(either: Either) -> Any:
                if either:
                    return self.lift(either.get)
                if returned:
                    return self.tail_rec(f, either.get)
                unrolled.append(either.get)
                return self.lift(None)

            m = self.sequence(f(a), cont)
            returned = True
            if not unrolled:
                return m
            a = unrolled[0]


class MonadSequencer(Sequencer):
    """
    `Sequencer` for types that implement `Monad` themselves

    Example:
        >>> from collect_until.maybe import Just
        >>> s = MonadSequencer(Just)
        >>> s.sequence(s.lift(1), lambda v: Just(v + 1))
        Just(2)
    """
    value: Callable[[Any], Monad]

    def lift(self, value: Any) -> Monad:
        return self.value(value)

    def sequence(self, m: Monad, f: Callable[[Any], Any]) -> Monad:
        return m.and_then(f)

    def map(self, m: Monad, f: Callable[[Any], Any]) -> Monad:
        return m.map(f)


__all__ = ['Monad', 'Sequencer', 'MonadSequencer']
