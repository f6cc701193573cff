from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from typing_extensions import Protocol

from .functions import Thunk
from .immutable import Immutable

C = TypeVar('C', bound='SupportsConcat')


class SupportsConcat(Protocol):
    def __add__(self: C, other: C) -> C:
        pass


class Combiner(Immutable, ABC):
    """
    Capability for merging two partial results. `combine` must be
    associative and preserve the order of its arguments. The right hand
    side is passed as a function of no arguments so that implementations
    can avoid producing it.
    """
    @abstractmethod
    def combine(self, x: Any, y: Callable[[], Any]) -> Any:
        """
        Merge ``x`` with the partial result produced by ``y``

        Args:
            x: The partial result collected first
            y: Function producing the partial result collected next
        Return:
            ``x`` and the result of ``y`` merged
        """
        raise NotImplementedError()


class ConcatCombiner(Combiner):
    """
    `Combiner` for anything that supports ``+``, such as lists,
    tuples and strings

    Example:
        >>> concat.combine(['a1', 'a2'], lambda: ['b1'])
        ['a1', 'a2', 'b1']
    """
    def combine(self, x: C, y: Thunk[C]) -> C:
        return x + y()


concat = ConcatCombiner()

__all__ = ['Combiner', 'ConcatCombiner', 'SupportsConcat', 'concat']
