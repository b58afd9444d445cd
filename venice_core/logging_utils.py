from __future__ import annotations

import logging
from typing import Optional

from . import config

LOGGER_NAME = 'venice'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns the package logger, or a child of it when name is given.

    The first call installs a stderr handler on the package logger. The level
    is DEBUG when VENICE_DEBUG is set, INFO otherwise.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] [%(name)s] %(message)s'
        ))
        root.addHandler(handler)
        root.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    if name:
        return root.getChild(name)
    return root
