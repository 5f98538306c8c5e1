"""
Логирование через structlog.

Библиотека только пишет события (logger.debug("creating_payment", ...)) в stdlib-логгеры
"kassa_connect.*" с NullHandler: пока приложение не настроило logging (или не вызвало
setup_logging() при старте), ничего не выводится.
Секретный ключ магазина в логи не попадает.
"""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import EventDict, Processor

from .settings import settings


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["app"] = settings.APP_NAME
    return event_dict


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    fmt = fmt or settings.LOG_FORMAT

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )

    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_app_context,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


logging.getLogger("kassa_connect").addHandler(logging.NullHandler())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    structlog-логгер поверх logging.getLogger(name).

    Usage:
        logger = get_logger(__name__)
        logger.debug("payment_created", payment_id=payment_id)
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
