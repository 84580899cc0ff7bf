"""Logging setup shared by every entry point.

Logs go to stderr so command output on stdout stays clean. With
``json=True`` each record is one JSON object carrying any ``extra``
fields (order id, error kind, user id).
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

PLAIN_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO", *, json: bool = False) -> None:
    handler = logging.StreamHandler(sys.stderr)
    if json:
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    root = logging.getLogger("orderbot")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False
