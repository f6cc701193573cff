from typing import Any, Callable, Tuple, TypeVar

from .combiner import Combiner
from .either import Left, Right
from .functions import curry
from .maybe import Just, Maybe, Nothing, from_optional
from .monad import Sequencer

I = TypeVar('I')  # noqa: E741

Step = Callable[[I], Any]
"""
Type-alias for functions from a continuation token to an effect
producing a ``(partial result, Maybe[next token])`` pair
"""


def _as_maybe(token: Any) -> Maybe:
    if isinstance(token, (Just, Nothing)):
        return token
    return from_optional(token)


@curry
def collect_until(sequencer: Sequencer,
                  combiner: Combiner,
                  step: Step,
                  initial: I) -> Any:
    """
    Call the effectful function ``step`` repeatedly, starting with
    ``initial``, for as long as it produces a next token, and combine the
    partial results of all calls from left to right with ``combiner``.
    Each call to ``step`` happens only after the effect produced by the
    previous call has succeeded. If any of them fails, so does the result,
    and no further calls are made.

    The function is curried, so ``collect_until(sequencer, combiner)`` gives
    a function of ``step``, which in turn gives a function of ``initial``.

    Example:
        >>> from collect_until import either, combiner
        >>> pages = {1: (['a1', 'a2'], Just(2)), 2: (['b1'], Nothing())}
        >>> fetch = lambda page: (Right(pages[page]) if page in pages
        ...                       else Left('invalid page'))
        >>> collect_rows = collect_until(either.sequencer, combiner.concat)
        >>> collect_rows(fetch)(1)
        Right(['a1', 'a2', 'b1'])

    Args:
        sequencer: `Sequencer` for the effect produced by ``step``
        combiner: `Combiner` for the partial results
        step: Function from a token to an effect producing a pair of \
            a partial result and a `Maybe` of the next token. `None` is \
            accepted in place of `Nothing()` and any other value in place \
            of `Just(value)`
        initial: The first token passed to ``step``
    Return:
        Effect producing all partial results combined
    """
    def fold(partial: Any) -> Callable[[Tuple[Any, Any]], Tuple[Any, Any]]:
        def f(pair: Tuple[Any, Any]) -> Tuple[Any, Any]:
            next_partial, token = pair
            return combiner.combine(partial, lambda: next_partial), token

        return f

    def go(in_flight: Any) -> Any:
        def cont(pair: Tuple[Any, Any]) -> Any:
            partial, token = pair
            token = _as_maybe(token)
            if isinstance(token, Nothing):
                return sequencer.lift(Right(partial))
            return sequencer.lift(
                Left(sequencer.map(step(token.get), fold(partial)))
            )

        return sequencer.sequence(in_flight, cont)

    return sequencer.tail_rec(go, step(initial))


__all__ = ['collect_until', 'Step']
