"""
`Logger.io`: call tracing for use cases, repositories and controllers

Every decorated call logs its masked arguments and its return value at debug
level. Nested decorated calls share the start time of the outermost one. Errors
are logged once, at the innermost decorated frame, then re-raised.
"""

from collections.abc import Awaitable, Generator, Iterator
from contextlib import contextmanager
from functools import wraps
from inspect import iscoroutinefunction, isgeneratorfunction
import types
from typing import TYPE_CHECKING, Any, Callable, Optional, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from drivent.platform.config.core_setting import settings
from drivent.platform.exception.exceptions import CustomBaseError
from drivent.platform.logging.generator_wrapper import GeneratorWrapper
from drivent.platform.logging.loguru_io_config import (
    ExtraField,
    GeneratorMethod,
    call_depth_var,
    custom_logger,
)
from drivent.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    handle_yield,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])

# Frames between a log call and the caller of the decorated function
_CALLER_DEPTH = 2
_CALLER_DEPTH_THROUGH_SCOPE = 4


class IOTracer:
    def __init__(
        self, sink: 'LoguruLogger', *, reraise: bool = True, truncate: bool = True
    ) -> None:
        self._sink = sink
        self.reraise = reraise
        self.truncate = truncate
        self.extra: dict[str, Any] = {}

    def _bound(self, depth: int) -> 'LoguruLogger':
        return self._sink.bind(**self.extra).opt(depth=depth)

    def log_call(
        self, *args: Any, yield_method: Optional[GeneratorMethod] = None, **kwargs: Any
    ) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if not settings.DEBUG:
            return
        self._bound(_CALLER_DEPTH_THROUGH_SCOPE).debug(
            f'{handle_yield(yield_method)}args: {self.mask_sensitive(args)}, '
            f'kwargs: {self.mask_sensitive(kwargs)}'
        )

    def log_result(self, value: Any, *, yield_method: Optional[GeneratorMethod] = None) -> None:
        if settings.DEBUG:
            self._bound(_CALLER_DEPTH).debug(
                f'{handle_yield(yield_method)}return: {self.mask_sensitive(value)}'
            )

    def log_error(self, error: Exception) -> None:
        if getattr(error, '_has_logged', False):
            return
        error._has_logged = True  # type: ignore[attr-defined]
        if isinstance(error, CustomBaseError):
            self._bound(_CALLER_DEPTH_THROUGH_SCOPE).error(
                f'{type(error).__name__}({error.status_code}): {error}'
            )
        else:
            self._bound(_CALLER_DEPTH_THROUGH_SCOPE).exception(f'{type(error).__name__}: {error}')

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            masked: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            masked = type(data)(self.mask_sensitive(item) for item in data)
        else:
            masked = mask_sensitive(data)
        return truncate_content(masked) if self.truncate else masked

    @contextmanager
    def _traced(self, *args: Any, **kwargs: Any) -> Iterator[None]:
        """Suppresses the error when reraise is off; the wrapper then returns None."""
        try:
            self.log_call(*args, **kwargs)
            yield
        except Exception as e:
            self.log_error(e)
            if self.reraise:
                raise
        finally:
            reset_call_depth()

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._sink.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                result = None
                with self._traced(*args, **kwargs):
                    call_args, call_kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    result = await cast(Awaitable[Any], func(*call_args, **call_kwargs))
                    self.log_result(result)
                return result

            return cast(_F, self._hide_from_traceback(async_wrapper))

        if isgeneratorfunction(func):

            @wraps(func)
            def generator_wrapper(*args: Any, **kwargs: Any) -> Optional[GeneratorWrapper]:
                wrapped = None
                with self._traced(*args, **kwargs):
                    gen = cast(Generator[Any, Any, Any], func(*args, **kwargs))
                    self.log_result(gen)
                    wrapped = GeneratorWrapper(gen, self)
                return wrapped

            return cast(_F, self._hide_from_traceback(generator_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            result = None
            with self._traced(*args, **kwargs):
                call_args, call_kwargs = normalize_args_kwargs(func, *args, **kwargs)
                result = func(*call_args, **call_kwargs)
                self.log_result(result)
            return result

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> IOTracer: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | IOTracer:
        tracer = IOTracer(custom_logger, reraise=reraise, truncate=truncate_content)
        return tracer(func) if func else tracer
