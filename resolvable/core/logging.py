# resolvable/core/logging.py
"""Component loggers for resolvable.

Dispatch records may carry ``request_id`` and ``dispatch_code`` through
``extra=``; ``ColoredFormatter`` renders them between the level and the
message so a resolution attempt can be followed across lines.
"""

import logging
import sys
from datetime import datetime

# Level applied to loggers created after set_default_level()
_default_level: int = logging.INFO

_RESET = '\033[0m'
_TIME = '\033[94m'
_TEXT = '\033[97m'
_TAG = '\033[96m'

_LEVEL_COLORS = {
    'DEBUG': '\033[90m',
    'INFO': '\033[92m',
    'WARNING': '\033[93m',
    'ERROR': '\033[91m',
    'CRITICAL': '\033[1;91m',
}


def dispatch_tags(record: logging.LogRecord) -> str:
    """'[req=1001 CANCELED]' from the record's extras, or '' when it has none."""
    parts: list[str] = []
    request_id = getattr(record, 'request_id', None)
    if request_id is not None:
        parts.append(f'req={request_id}')
    dispatch_code = getattr(record, 'dispatch_code', None)
    if dispatch_code is not None:
        parts.append(str(dispatch_code))
    return f"[{' '.join(parts)}]" if parts else ''


class ColoredFormatter(logging.Formatter):
    """[time] [component]  [LEVEL]   [req=N CODE] message"""

    def format(self, record: logging.LogRecord) -> str:
        time_str = datetime.fromtimestamp(record.created).strftime('%H:%M:%S')
        component = record.name.rsplit('.', 1)[-1]
        level_color = _LEVEL_COLORS.get(record.levelname, _TEXT)

        # [resolution] = 12 chars; [WARNING] = 9 chars
        formatted = (
            f'{_TIME}[{time_str}]{_RESET} '
            f'{_TEXT}{f"[{component}]".ljust(14)}{_RESET}'
            f'{level_color}{f"[{record.levelname}]".ljust(10)}{_RESET}'
        )
        tags = dispatch_tags(record)
        if tags:
            formatted += f'{_TAG}{tags}{_RESET} '
        formatted += f'{_TEXT}{record.getMessage()}{_RESET}'

        if record.exc_info:
            formatted += '\n' + self.formatException(record.exc_info)

        return formatted


def set_default_level(level: int) -> None:
    global _default_level
    _default_level = level


def get_logger(component_name: str) -> logging.Logger:
    """Logger named ``resolvable.<component_name>`` with one stdout handler."""
    logger = logging.getLogger(f'resolvable.{component_name}')

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColoredFormatter())
        handler.setLevel(_default_level)
        logger.addHandler(handler)
        logger.setLevel(_default_level)
        logger.propagate = False

    return logger
