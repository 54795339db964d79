"""Structured logging setup for keysmith.

Library modules log through plain ``logging.getLogger(__name__)`` with their
fields passed as ``extra``; nothing is printed until an application installs a
handler. :func:`configure_logging` installs one on the ``keysmith`` logger that
renders both those records and native structlog events (used by the CLI) as
JSON lines through a single :class:`structlog.stdlib.ProcessorFormatter`.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Any, List

import structlog

_ROOT_LOGGER = "keysmith"
_DEFAULT_LEVEL = "INFO"


def _shared_processors() -> List[Any]:
    return [
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _logger_to_component,
    ]


def configure_logging(level: str | None = None, stream: IO[str] | None = None) -> logging.Logger:
    """Route keysmith log records to ``stream`` (stderr by default) as JSON.

    Every line carries ``ts``, ``level``, ``component`` and ``msg`` plus the
    event fields. Calling it again replaces the previous handler.
    """
    numeric_level = logging.getLevelName((level or _DEFAULT_LEVEL).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*_shared_processors(), structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _rename_event_to_msg,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.handlers = [handler]
    logger.setLevel(numeric_level)
    logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    return logger


def _logger_to_component(
    _logger: Any, _name: str, event_dict: structlog.typing.EventDict
) -> structlog.typing.EventDict:
    name = event_dict.pop("logger", None)
    event_dict.setdefault("component", name or _ROOT_LOGGER)
    return event_dict


def _rename_event_to_msg(
    _logger: Any, _name: str, event_dict: structlog.typing.EventDict
) -> structlog.typing.EventDict:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["configure_logging"]
