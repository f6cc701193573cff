from typing import Callable, List, TypeVar, Union

from . import effect, either, maybe, trampoline

try:
    from hypothesis.strategies import (SearchStrategy, booleans, builds,
                                       floats, integers, just, lists, one_of,
                                       recursive, text)
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use '
        'collect_until.hypothesis_strategies, '
        'install collect-until with \n\n\tpip install collect-until[test]'
    )

A = TypeVar('A')


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(
        integers(), booleans(), text(), floats(allow_nan=allow_nan)
    )


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces constant functions of
    one argument

    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    return return_strategy.map(lambda a: lambda _: a)


def maybes(value_strategy: SearchStrategy[A]
           ) -> SearchStrategy[maybe.Maybe[A]]:
    return one_of(builds(maybe.Just, value_strategy), just(maybe.Nothing()))


def eithers(value_strategy: SearchStrategy[A]
            ) -> SearchStrategy[either.Either[A, A]]:
    return one_of(
        builds(either.Left, value_strategy),
        builds(either.Right, value_strategy)
    )


def trampolines(value_strategy: SearchStrategy[A]
                ) -> SearchStrategy[trampoline.Trampoline[A]]:
    """
    Create a search strategy that produces nested
    `collect_until.trampoline.Trampoline` structures

    Args:
        value_strategy: strategy used to draw result values
    Return:
        search strategy that produces trampolines
    """
    def extend(children):
        calls = children.map(lambda t: trampoline.Call(lambda: t))
        and_thens = children.flatmap(
            lambda t: unaries(children).map(lambda f: t.and_then(f))
        )
        return one_of(calls, and_thens)

    return recursive(
        builds(trampoline.Done, value_strategy), extend, max_leaves=10
    )


def effects(value_strategy: SearchStrategy[A],
            include_errors: bool = False,
            max_leaves: int = 10) -> SearchStrategy[effect.Effect]:
    """
    Create a search strategy that produces `collect_until.effect.Effect`
    instances built with `map` and `and_then`

    Args:
        value_strategy: search strategy used to draw success values
        include_errors: whether to include effects that fail
        max_leaves: max number of leaf effects to be drawn
    Return:
        search strategy that produces effects
    """
    def extend(children):
        maps = children.flatmap(
            lambda e: unaries(value_strategy).map(lambda f: e.map(f))
        )
        and_thens = children.flatmap(
            lambda e: unaries(children).map(lambda f: e.and_then(f))
        )
        return one_of(maps, and_thens)

    leaves = builds(effect.success, value_strategy)
    if include_errors:
        leaves = one_of(leaves, builds(effect.error, value_strategy))
    return recursive(leaves, extend, max_leaves=max_leaves)


def pages(value_strategy: SearchStrategy[A] = anything(),
          min_size: int = 1,
          max_size: int = 20) -> SearchStrategy[List[List[A]]]:
    """
    Create a search strategy that produces the partial results of a
    sequence of pages, i.e lists of lists. Page ``n`` (counting from 0)
    is meant to be produced by a step called with token ``n``.

    Args:
        value_strategy: strategy used to draw the rows of each page
        min_size: least number of pages
        max_size: largest number of pages
    Return:
        search strategy that produces lists of pages
    """
    return lists(
        lists(value_strategy, max_size=5),
        min_size=min_size,
        max_size=max_size
    )


__all__ = [
    'anything',
    'unaries',
    'maybes',
    'eithers',
    'trampolines',
    'effects',
    'pages'
]
