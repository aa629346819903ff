from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# test/conftest.py points this at a temp directory
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

# Argument and result keys masked by @Logger.io
SENSITIVE_KEYWORDS = {
    'password',
    'token',
    'secret',
    'authorization',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# (lowest status, level) from the top down
_HTTP_STATUS_LEVELS = (
    (500, 'CRITICAL'),
    (400, 'ERROR'),
    (300, 'WARNING'),
    (200, 'SUCCESS'),
)

_STDLIB_LOGGERS = ('uvicorn', 'uvicorn.error', 'uvicorn.access', 'sqlalchemy.engine', 'alembic')


def _bind_defaults() -> 'LoguruLogger':
    return loguru_logger.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CHAIN_START_TIME: '',
            ExtraField.CALL_TARGET: '',
        }
    )


def _access_log_level(message: str) -> str | None:
    """
    Level for a uvicorn access line, picked by its status code.

    '127.0.0.1:51234 - "POST /api/accommodation/bookings HTTP/1.1" 409' -> ERROR
    """
    if ' HTTP/' not in message or message.count('"') < 2:
        return None
    try:
        status_code = int(message.rsplit('"', 1)[1].split()[0])
    except (ValueError, IndexError):
        return None

    for lowest, level in _HTTP_STATUS_LEVELS:
        if status_code >= lowest:
            return level
    return 'INFO'


class InterceptHandler(logging.Handler):
    """Route stdlib logging (uvicorn, sqlalchemy, alembic) through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.levelno <= logging.DEBUG and 'Using selector:' in message:
            return

        level = _access_log_level(message) if record.name == 'uvicorn.access' else None
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Skip logging's own frames so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        _intercept_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


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

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

loguru_logger.remove()
custom_logger = _bind_defaults()
_intercept_logger = _bind_defaults()

custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

# Hourly files in DEBUG only; elsewhere stdout is collected by the platform
if settings.DEBUG:
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    custom_logger.add(
        f'{LOG_DIR}/{prefix}{datetime.now(timezone.utc):%Y-%m-%d_%H}.log',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

for logger_name in _STDLIB_LOGGERS:
    stdlib_logger = logging.getLogger(logger_name)
    stdlib_logger.handlers = [InterceptHandler()]
    stdlib_logger.propagate = False
