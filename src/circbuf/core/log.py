"""Logging for the circbuf package.

Only the ``circbuf`` logger is touched; handlers the host application put on
the root logger (or anywhere else) are left alone.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ROOT = "circbuf"

_handler: Optional[logging.Handler] = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "ts": record.created,
                "lvl": record.levelname,
                "name": record.name,
                "msg": record.getMessage(),
                "filename": record.filename,
                "lineno": record.lineno,
                "funcName": record.funcName,
            },
            ensure_ascii=False,
        )


def _resolve_level(level: str) -> int:
    py_level = getattr(logging, level.upper(), None)
    return py_level if isinstance(py_level, int) else logging.INFO


def setup(level: Optional[str] = None, json_mode: Optional[bool] = None, *, force: bool = False) -> None:
    """Attach a stdout handler to the ``circbuf`` logger.
    - Reads LOG_LEVEL, LOG_JSON from env (and .env) if args are None
    - Already set up: no-op unless force=True, which swaps our handler only
    """
    global _handler
    if _handler is not None and not force:
        return

    load_dotenv(find_dotenv(usecwd=True))

    py_level = _resolve_level(level or os.getenv("LOG_LEVEL", "INFO"))
    json_flag = json_mode if json_mode is not None else (os.getenv("LOG_JSON", "0") == "1")

    handler = logging.StreamHandler(stream=sys.stdout)
    if json_flag:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt="[%(asctime)s] %(levelname)s %(name)s | %(message)s"))

    pkg = logging.getLogger(ROOT)
    if _handler is not None:
        pkg.removeHandler(_handler)
        _handler.close()
    pkg.addHandler(handler)
    pkg.setLevel(py_level)
    _handler = handler


def get(name: str) -> logging.Logger:
    """Logger under the ``circbuf`` namespace (prefixed if needed)."""
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Adjust the package log level at runtime (e.g. during tests)."""
    logging.getLogger(ROOT).setLevel(_resolve_level(level))
