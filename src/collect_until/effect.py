from __future__ import annotations

import asyncio
from functools import wraps
from inspect import isawaitable
from typing import (Any, Awaitable, Callable, Generic, NoReturn, Optional,
                    Type, TypeVar, Union)

from .aio_trampoline import Done, Trampoline
from .either import Either, Left, Right
from .immutable import Immutable
from .monad import Monad, MonadSequencer

R = TypeVar('R', contravariant=True)
E = TypeVar('E', covariant=True)
A = TypeVar('A', covariant=True)
B = TypeVar('B')
EX = TypeVar('EX', bound=Exception)


class Effect(Immutable, Monad, Generic[R, E, A]):
    """
    Asynchronous computation that depends on an environment of type ``R``
    and either fails with a reason of type ``E`` or succeeds with a value
    of type ``A``. Nothing happens until the effect is run with `run` or
    awaited with `__call__`, and each run starts over.

    Example:
        >>> async def fetch_page(page):
        ...     return ['row1', 'row2']
        >>> from_awaitable(fetch_page(1)).map(len).run(None)
        2
    """
    run_e: Callable[[R], Awaitable[Trampoline[Either[E, A]]]]

    def and_then(self, f: Callable[[A], Effect[Any, Any, B]]
                 ) -> Effect[Any, Any, B]:
        """
        Chain together effectful computations. ``f`` is not called
        if this effect fails.

        Example:
            >>> success(1).and_then(lambda page: error(f'no page {page}')
            ...                     ).either().run(None)
            Left('no page 1')

        Args:
            f: Function producing the effect to run next
        Return:
            Effect running this effect and then the effect produced by ``f``
        """
        async def run_e(r):
            async def cont(either):
                if isinstance(either, Left):
                    return Done(either)
                return await f(either.get).run_e(r)

            trampoline = await self.run_e(r)
            return trampoline.and_then(cont)

        return Effect(run_e)

    def map(self, f: Callable[[A], Union[Awaitable[B], B]]
            ) -> Effect[R, E, B]:
        """
        Apply ``f`` to the value this effect succeeds with. If ``f``
        returns an awaitable, it is awaited.

        Example:
            >>> success(['row1', 'row2']).map(len).run(None)
            2
        """
        async def run_e(r):
            async def cont(either):
                if isinstance(either, Left):
                    return Done(either)
                result = f(either.get)
                if isawaitable(result):
                    result = await result
                return Done(Right(result))

            trampoline = await self.run_e(r)
            return trampoline.and_then(cont)

        return Effect(run_e)

    def discard_and_then(self, effect: Effect[Any, Any, B]
                         ) -> Effect[Any, Any, B]:
        """
        Run ``effect`` after this one, ignoring the value this one
        succeeds with
        """
        return self.and_then(lambda _: effect)

    def either(self) -> Effect[R, NoReturn, Either[E, A]]:
        """
        Move the outcome of this effect into an `Either`, so that
        failures can be inspected as values

        Example:
            >>> error('invalid page').either().run(None)
            Left('invalid page')
        """
        async def run_e(r):
            trampoline = await self.run_e(r)
            return trampoline.map(Right)

        return Effect(run_e)

    async def __call__(self, r: R) -> A:
        """
        Run this effect in the running event loop

        Args:
            r: The environment with which to run this effect
        Raises:
            E: If the effect fails and its reason is an `Exception`
            RuntimeError: If the effect fails with any other reason
        Return:
            The value this effect succeeds with
        """
        trampoline = await self.run_e(r)
        result = await trampoline.run()
        if isinstance(result, Left):
            if isinstance(result.get, Exception):
                raise result.get
            raise RuntimeError(result.get)
        return result.get

    def run(self, r: R, asyncio_run: Callable[[Awaitable[A]], A] = asyncio.run
            ) -> A:
        """
        Run this effect in a new event loop

        Example:
            >>> success(1).run(None)
            1

        Args:
            r: The environment with which to run this effect
            asyncio_run: Function used to run the coroutine of this effect
        Return:
            The value this effect succeeds with
        """
        return asyncio_run(self(r))


def success(value: B) -> Effect[object, NoReturn, B]:
    """
    Create an effect that succeeds with ``value``
    """
    async def run_e(_):
        return Done(Right(value))

    return Effect(run_e)


def error(reason: B) -> Effect[object, B, NoReturn]:
    """
    Create an effect that fails with ``reason``
    """
    async def run_e(_):
        return Done(Left(reason))

    return Effect(run_e)


def get_environment(r_type: Optional[Type[R]] = None
                    ) -> Effect[R, NoReturn, R]:
    """
    Create an effect that succeeds with the environment it is run with.
    ``r_type`` only documents the expected environment type.

    Example:
        >>> get_environment().map(lambda env: env['page_size']).run(
        ...     {'page_size': 10}
        ... )
        10
    """
    async def run_e(r):
        return Done(Right(r))

    return Effect(run_e)


def from_awaitable(awaitable: Awaitable[B]) -> Effect[object, NoReturn, B]:
    """
    Create an effect that succeeds with the result of ``awaitable``.
    Exceptions it raises are not caught, see `catch`. A coroutine can only
    be awaited once, so the effect can only be run once.
    """
    async def run_e(_):
        return Done(Right(await awaitable))

    return Effect(run_e)


def catch(error: Type[EX], *errors: Type[EX]
          ) -> Callable[[Callable[..., Any]], Callable[..., Effect]]:
    """
    Decorate a function or coroutine function so that it returns an
    effect which fails with the exceptions of the given types that
    calling it raises

    Example:
        >>> @catch(KeyError)
        ... def row(page):
        ...     return {1: 'row1'}[page]
        >>> row(2).either().run(None)
        Left(KeyError(2))

    Args:
        error: The first exception type to catch
        errors: The remaining exception types to catch
    Return:
        decorator turning functions into functions returning effects
    """
    caught = (error, ) + errors

    def decorator(f: Callable[..., Any]) -> Callable[..., Effect]:
        @wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Effect[object, EX, Any]:
            async def run_e(_):
                try:
                    result = f(*args, **kwargs)
                    if isawaitable(result):
                        result = await result
                    return Done(Right(result))
                except caught as e:
                    return Done(Left(e))

            return Effect(run_e)

        return wrapper

    return decorator


sequencer = MonadSequencer(success)
"""
`Sequencer` that lifts values with `success` and fails with `error`.
Steps run only when the resulting effect is run, one at a time.
"""

__all__ = [
    'Effect',
    'success',
    'error',
    'get_environment',
    'from_awaitable',
    'catch',
    'sequencer'
]
