"""Logging setup for the wavegen CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers and
never touch handlers. The ``wavegen`` entrypoint calls
:func:`setup_logging` once, which attaches a console handler and,
optionally, a (rotating) file handler to the root logger.

Records carry the fields set with :func:`push_context`, e.g. the app name
and the seed being rendered::

    2026-03-02T09:14:55.120Z | INFO     | app=wavegen seed=42 | Rendered 3 layer(s), ...
    {"t": "2026-03-02T09:14:55.120000+00:00", "lvl": "INFO", ..., "seed": 42}

The second form is written when ``json=True`` (file handler only).
"""

import contextvars
import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


_context_var: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    'wavegen_log_context', default={}
)

# Handlers attached by setup_logging(); replaced on the next call
_installed_handlers: List[logging.Handler] = []

_LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
_RESET = '\033[0m'


class ContextFormatter(logging.Formatter):
    """Render records as ``time | level | context | message`` or JSON lines.

    Parameters
    ----------
    fmt_mode : str
        ``"human"`` or ``"json"``.
    use_color : bool
        Color the level name; ignored unless stderr is a terminal.
    tz : str
        ``"UTC"`` or ``"local"`` timestamps.
    """

    def __init__(self, fmt_mode: str = "human", use_color: bool = True, tz: str = "UTC"):
        super().__init__()
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()
        self.tz = tz

    def _timestamp(self, record: logging.LogRecord) -> datetime:
        if self.tz == "UTC":
            return datetime.fromtimestamp(record.created, tz=timezone.utc)
        return datetime.fromtimestamp(record.created)

    def format(self, record: logging.LogRecord) -> str:
        ts = self._timestamp(record)
        context = _context_var.get()
        if self.fmt_mode == "json":
            return self._format_json(record, ts, context)
        return self._format_human(record, ts, context)

    def _format_json(self, record: logging.LogRecord, ts: datetime, context: dict) -> str:
        entry: Dict[str, Any] = {
            't': ts.isoformat(),
            'lvl': record.levelname,
            'name': record.name,
            'pid': os.getpid(),
            'msg': record.getMessage(),
            **context,
        }
        if record.exc_info:
            entry['exc'] = self.formatException(record.exc_info)
        return json.dumps(entry)

    def _format_human(self, record: logging.LogRecord, ts: datetime, context: dict) -> str:
        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{_LEVEL_COLORS.get(record.levelname, '')}{level}{_RESET}"

        fields = [ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z', level]
        if context:
            fields.append(' '.join(f"{k}={v}" for k, v in context.items()))
        fields.append(record.getMessage())

        line = ' | '.join(fields)
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    rotate: Optional[Dict[str, Any]] = None,
    tz: str = "UTC",
    capture_warnings: bool = True,
    quiet_libs: Optional[List[str]] = None,
    context: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Attach wavegen's handlers to the root logger.

    Calling it again swaps out the handlers from the previous call;
    handlers added by anything else (pytest's capture, for one) stay.

    Parameters
    ----------
    log_level : str
        Level name, case-insensitive.
    log_file : str, optional
        Also log to this file (parent directories are created).
    json : bool
        Write the file as JSON lines instead of the human format.
    color : bool
        Color console level names when stderr is a terminal.
    to_stderr : bool
        Install the console handler.
    rotate : dict, optional
        File rotation, ``{"mode": "size", "max_bytes": ..., "backup_count": ...}``
        or ``{"mode": "time", "when": "D", "interval": 1, "backup_count": ...}``.
    tz : str
        ``"UTC"`` (default) or ``"local"``.
    capture_warnings : bool
        Route :mod:`warnings` through logging.
    quiet_libs : list[str], optional
        Logger names raised to WARNING.
    context : dict, optional
        Fields pushed with :func:`push_context` before returning.

    Returns
    -------
    dict
        ``{"handlers": [...]}``, the handlers installed by this call.

    Raises
    ------
    ValueError
        If the level or the rotation mode is unknown.
    """
    root = logging.getLogger()

    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    root.setLevel(level)

    handlers: List[logging.Handler] = []
    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ContextFormatter("human", color, tz))
        handlers.append(console)
    if log_file:
        handlers.append(_create_file_handler(log_file, rotate, json, tz))

    for handler in handlers:
        root.addHandler(handler)
    _installed_handlers.extend(handlers)

    for lib in quiet_libs or []:
        logging.getLogger(lib).setLevel(logging.WARNING)
    if capture_warnings:
        route_warnings()
    if context:
        push_context(**context)

    return {'handlers': handlers}


def _create_file_handler(
    log_file: str,
    rotate: Optional[Dict[str, Any]],
    json_format: bool,
    tz: str
) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    mode = rotate.get('mode', 'size') if rotate else None
    if mode is None:
        handler: logging.Handler = logging.FileHandler(log_file)
    elif mode == 'size':
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=rotate.get('max_bytes', 5_000_000),
            backupCount=rotate.get('backup_count', 5),
        )
    elif mode == 'time':
        handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when=rotate.get('when', 'D'),
            interval=rotate.get('interval', 1),
            backupCount=rotate.get('backup_count', 7),
        )
    else:
        raise ValueError(f"Unknown rotation mode: {mode!r} (expected 'size' or 'time')")

    handler.setFormatter(
        ContextFormatter("json" if json_format else "human", use_color=False, tz=tz)
    )
    return handler


def push_context(**kwargs) -> None:
    """Add fields to every following record, e.g. ``push_context(seed=7)``."""
    _context_var.set({**_context_var.get(), **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Drop the given context fields, or all of them when ``keys`` is None."""
    if keys is None:
        _context_var.set({})
        return
    _context_var.set({k: v for k, v in _context_var.get().items() if k not in keys})


def route_warnings() -> None:
    """Send :mod:`warnings` output to the ``py.warnings`` logger."""
    logging.captureWarnings(True)
    logging.getLogger('py.warnings').setLevel(logging.WARNING)
