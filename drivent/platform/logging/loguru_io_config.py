"""
Loguru sinks, shared context variables, and stdlib logging interception

Importing this module configures logging once for the process:
stdout always, plus an hourly rotated file under LOG_DIR while DEBUG is on.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING, Optional

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from drivent.platform.config.core_setting import settings
from drivent.platform.constant.path import LOG_DIR
from drivent.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

# Keyword arguments and `key=value` / `'key': value` pairs masked in Logger.io output
SENSITIVE_KEYWORDS = {
    'password',
    'plain_password',
    'token',
    'card_number',
    'cvv',
}

MAX_CONTENT_LENGTH = 1000

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


class GeneratorMethod(StrEnum):
    NEXT = 'next'
    SEND = 'send'
    THROW = 'throw'


# Lowest status code first; the last threshold not above the code wins
_STATUS_LEVELS = ((100, 'INFO'), (200, 'SUCCESS'), (300, 'WARNING'), (400, 'ERROR'), (500, 'CRITICAL'))

# Debug chatter from pytest-bdd step matching and asyncio
_IGNORED_DEBUG_FRAGMENTS = (('format ', ' -> '), ('Using selector:', 'Selector'))


def access_log_level(message: str) -> Optional[str]:
    """
    Level for a uvicorn access line such as
    '127.0.0.1:51234 - "GET /booking HTTP/1.1" 200', or None for other messages.
    """
    if ' - "' not in message or ' HTTP/' not in message:
        return None
    _, _, tail = message.rpartition('"')
    status_code = next((int(token) for token in tail.split() if token.isdigit()), None)
    if status_code is None:
        return None

    level = 'INFO'
    for threshold, name in _STATUS_LEVELS:
        if status_code >= threshold:
            level = name
    return level


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    """Routes stdlib records (uvicorn, sqlalchemy, httpx) into loguru."""

    def __init__(self) -> None:
        super().__init__()
        self._logger = loguru_logger.bind(**_default_extra())

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.levelno <= logging.DEBUG and any(
            all(fragment in message for fragment in fragments)
            for fragments in _IGNORED_DEBUG_FRAGMENTS
        ):
            return

        level: str | int
        if (access_level := access_log_level(message)) is not None:
            level = access_level
        else:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        self._logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _configure() -> 'LoguruLogger':
    loguru_logger.remove()
    level = 'DEBUG' if settings.DEBUG else 'INFO'
    loguru_logger.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    if settings.DEBUG:
        prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
        hour = datetime.now().astimezone().strftime('%Y-%m-%d_%H')
        loguru_logger.add(
            f'{LOG_DIR}/{prefix}{hour}.log',
            format=io_log_format,
            level=level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for noisy in ('aiosqlite', 'httpcore', 'multipart'):
        logging.getLogger(noisy).setLevel(logging.INFO)

    return loguru_logger.bind(**_default_extra())


custom_logger = _configure()
