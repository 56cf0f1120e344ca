"""Logging setup shared by every pipeline stage."""
import logging
import sys
from contextlib import contextmanager
from typing import Iterator

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER = "iconify_loader"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger living under the package namespace.

    Handlers are attached once, on the package root logger, so module
    loggers just propagate to it.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


@contextmanager
def verbosity(verbose: bool) -> Iterator[None]:
    """Raise the package logger to DEBUG for the duration of the block."""
    root = get_logger(ROOT_LOGGER)
    previous = root.level
    if verbose:
        root.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        root.setLevel(previous)
