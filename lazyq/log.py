import logging
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(message)s'

# the stream handler installed by configure_logging, if any
_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """get a logger under the lazyq hierarchy"""
    if name != 'lazyq' and not name.startswith('lazyq.'):
        name = f"lazyq.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> logging.Logger:
    """
    attach a stream handler to the package logger.
    the library itself only installs a NullHandler; applications call this
    (or configure logging themselves) to see operator diagnostics. calling it
    again replaces the handler from the previous call.
    """
    global _handler
    formatter = logging.Formatter(fmt or DEFAULT_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    package_logger = logging.getLogger('lazyq')
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = handler
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
