import functools
import inspect
from typing import Callable, TypeVar

A = TypeVar('A')

Thunk = Callable[[], A]
"""
Function of no arguments producing a value on demand. `Combiner` uses
thunks for the right-hand side of `combine`
"""


def curry(f: Callable) -> Callable:
    """
    Get a version of ``f`` that can be called with its arguments spread
    over several calls. ``f`` is called as soon as all of its parameters
    without defaults are bound.

    Example:
        >>> def fetch(base_url, page, page_size=10):
        ...     return f'{base_url}?page={page}&size={page_size}'
        >>> curry(fetch)('https://example.com')(2)
        'https://example.com?page=2&size=10'
        >>> curry(fetch)(page=2)('https://example.com')
        'https://example.com?page=2&size=10'

    Args:
        f: function to curry
    Return:
        curried version of ``f``
    """
    signature = inspect.signature(f)

    @functools.wraps(f)
    def curried(*args, **kwargs):
        bound = signature.bind_partial(*args, **kwargs)
        bound.apply_defaults()
        if len(bound.arguments) == len(signature.parameters):
            return f(*args, **kwargs)
        return curry(functools.partial(f, *args, **kwargs))

    return curried


__all__ = ['curry', 'Thunk']
