from dataclasses import dataclass


class Immutable:
    """
    Super class that turns subclasses into frozen dataclasses. Every value
    passed between steps of a collection (effects, tokens, partial results
    wrapped in `Just` or `Right`) is built on it, so a step can never
    mutate what an earlier step produced.

    Example:
        >>> class Page(Immutable):
        ...     rows: tuple
        ...     next_page: int
        >>> page = Page(('row1', ), 2)
        >>> page.next_page = 3
        Traceback (most recent call last):
        ...
        dataclasses.FrozenInstanceError: cannot assign to field 'next_page'

    """

    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False,
                          unsafe_hash: bool = False) -> None:
        super().__init_subclass__()
        if not hasattr(cls, '__annotations__'):
            cls.__annotations__ = {}
        dataclass(
            frozen=True,
            init=init,
            repr=repr,
            eq=eq,
            order=order,
            unsafe_hash=unsafe_hash
        )(cls)


__all__ = ['Immutable']
