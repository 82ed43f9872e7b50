from types import TracebackType
from typing import TYPE_CHECKING, Any, Callable, Generator, Self

from drivent.platform.logging.loguru_io_config import GeneratorMethod
from drivent.platform.logging.loguru_io_utils import reset_call_depth


if TYPE_CHECKING:
    from drivent.platform.logging.loguru_io import IOTracer


class GeneratorWrapper:
    """Forwards the generator protocol and logs every value crossing a yield."""

    def __init__(self, gen: Generator[Any, Any, Any], tracer: 'IOTracer') -> None:
        self.gen = gen
        self._tracer = tracer

    def __iter__(self) -> Self:
        return self

    def _step(
        self, method: GeneratorMethod, advance: Callable[[], Any], *args: Any, **kwargs: Any
    ) -> Any:
        self._tracer.log_call(*args, yield_method=method, **kwargs)
        try:
            value = advance()
        except StopIteration as stop:
            self._tracer.log_result(stop.value, yield_method=method)
            raise
        finally:
            reset_call_depth()
        self._tracer.log_result(value, yield_method=method)
        return value

    def __next__(self) -> Any:
        return self._step(GeneratorMethod.NEXT, lambda: next(self.gen))

    def send(self, value: Any) -> Any:
        return self._step(GeneratorMethod.SEND, lambda: self.gen.send(value), value)

    def throw(
        self,
        exc_type: type[BaseException],
        exc_val: BaseException | None = None,
        tb: TracebackType | None = None,
    ) -> Any:
        error = exc_val if exc_val is not None else exc_type()
        return self._step(
            GeneratorMethod.THROW,
            lambda: self.gen.throw(error.with_traceback(tb)),
            exc_type=exc_type,
            exc_val=exc_val,
        )

    def close(self) -> None:
        self.gen.close()
