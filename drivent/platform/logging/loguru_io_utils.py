from inspect import Parameter, getfile, getsourcelines, signature, unwrap
from os.path import basename
import re
from time import time
from typing import Any, Callable, Optional

from drivent.platform.logging.loguru_io_config import (
    MAX_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    GeneratorMethod,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'

# `password='x'`, `'password': 'x'`, `"token": "x"` inside a repr
_SENSITIVE_PAIR = re.compile(
    r"""(['"]?(?:%s)['"]?\s*[:=]\s*)(['"])(.*?)\2""" % '|'.join(sorted(SENSITIVE_KEYWORDS)),
    re.IGNORECASE,
)

_POSITIONAL_KINDS = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)
_KEYWORD_KINDS = (Parameter.POSITIONAL_OR_KEYWORD, Parameter.KEYWORD_ONLY)


def handle_yield(yield_method: Optional[GeneratorMethod] = None) -> str:
    return f'yield: {yield_method} | ' if yield_method else ''


def get_chain_start_time() -> float:
    started = chain_start_time_var.get()
    if not started:
        started = time()
        chain_start_time_var.set(started)
    return started


def reset_call_depth() -> None:
    depth = call_depth_var.get() - 1
    call_depth_var.set(depth)
    if depth == 0:
        chain_start_time_var.set(0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        location = f'{basename(getfile(target))}::{func.__qualname__}:{getsourcelines(target)[1]}'
    except (OSError, TypeError):
        location = f'<unknown>::{func.__qualname__}:0'
    return location


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    """
    Drop what the target cannot accept: unknown keyword arguments, and positional
    arguments beyond its positional parameters. `*args` / `**kwargs` targets keep all.
    """
    params = list(signature(unwrap(func)).parameters.values())
    kinds = {param.kind for param in params}

    if Parameter.VAR_KEYWORD not in kinds:
        accepted = {param.name for param in params if param.kind in _KEYWORD_KINDS}
        kwargs = {key: value for key, value in kwargs.items() if key in accepted}

    if Parameter.VAR_POSITIONAL not in kinds:
        open_slots = [
            param.name
            for param in params
            if param.kind in _POSITIONAL_KINDS and param.name not in kwargs
        ]
        args = args[: len(open_slots)]

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    if data is None or isinstance(data, (bool, int, float)):
        return data
    text = str(data)
    masked = _SENSITIVE_PAIR.sub(rf'\1\2{MASK}\2', text)
    return masked if masked != text else data


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any) -> Any:
    text = data if isinstance(data, str) else repr(data)
    overflow = len(text) - MAX_CONTENT_LENGTH
    if overflow <= 0:
        return data
    return f'{text[:MAX_CONTENT_LENGTH]}... (+{overflow} chars)'
