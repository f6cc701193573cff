import logging
from types import TracebackType
from typing import Callable, Optional, Tuple, Type, Union

from .effect import Effect, success
from .immutable import Immutable

ExcInfo = Union[bool, Tuple[Type[BaseException], BaseException,
                            TracebackType]]


class Logger(Immutable):
    """
    Wrapper around built-in `logging.Logger` whose methods return effects
    that log when they are run, so that steps given to `collect_until` can
    log as part of the effect they produce

    Example:
        >>> from collect_until import effect
        >>> logger = Logger(logging.getLogger('pages'))
        >>> fetch = logger.info('fetching page 1').discard_and_then(
        ...     effect.success(['row1'])
        ... )
        >>> fetch.run(None)
        ['row1']
    """
    logger: logging.Logger

    def _log(self,
             method: Callable[..., None],
             msg: str,
             stack_info: bool,
             exc_info: ExcInfo) -> Effect[object, None, None]:
        return success(msg).map(
            lambda m: method(m, stack_info=stack_info, exc_info=exc_info)
        )

    def debug(self,
              msg: str,
              stack_info: bool = False,
              exc_info: ExcInfo = False) -> Effect[object, None, None]:
        """
        Create an effect that calls built-in `logging.Logger.debug`

        Args:
            msg: the log message
            stack_info: whether to include stack information in the \
                log message
            exc_info: whether to include exception info in the log message

        Return:
            `Effect` that calls `logging.Logger.debug` with `msg`
        """
        return self._log(self.logger.debug, msg, stack_info, exc_info)

    def info(self,
             msg: str,
             stack_info: bool = False,
             exc_info: ExcInfo = False) -> Effect[object, None, None]:
        return self._log(self.logger.info, msg, stack_info, exc_info)

    def warning(self,
                msg: str,
                stack_info: bool = False,
                exc_info: ExcInfo = False) -> Effect[object, None, None]:
        return self._log(self.logger.warning, msg, stack_info, exc_info)

    def error(self,
              msg: str,
              stack_info: bool = False,
              exc_info: ExcInfo = False) -> Effect[object, None, None]:
        return self._log(self.logger.error, msg, stack_info, exc_info)

    def exception(self,
                  msg: str,
                  stack_info: bool = False,
                  exc_info: ExcInfo = True) -> Effect[object, None, None]:
        """
        Create an effect that calls built-in `logging.Logger.exception`.
        Unlike the other methods, exception info is included by default.
        """
        return self._log(self.logger.exception, msg, stack_info, exc_info)


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Get a `Logger` wrapping the built-in logger returned by
    `logging.getLogger`

    Args:
        name: name of logger
    Return:
        `Logger` wrapping `logging.getLogger(name)`
    """
    return Logger(logging.getLogger(name))


__all__ = ['Logger', 'get_logger']
