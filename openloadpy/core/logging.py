"""Logging utilities for openloadpy modules."""

import logging

ROOT_LOGGER_NAME = 'openloadpy'


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    This ensures that loggers work with basicConfig() without needing
    explicit setup_logging() calls. The logger will:
    - Live under the ``openloadpy`` namespace
    - Propagate to root logger (default behavior)
    - Only set a default level if root logger has no handlers

    Args:
        name: Logger name (typically __name__), prefixed with
            ``openloadpy.`` when it is not already

    Returns:
        Configured logger instance
    """
    if not name:
        name = ROOT_LOGGER_NAME
    elif name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'

    logger = logging.getLogger(name)
    logger.propagate = True

    # Only set default level if root logger has no handlers
    # (i.e., basicConfig hasn't been called yet)
    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger


def redact_params(params: dict, secret_keys=('login', 'key')) -> dict:
    """Returns a copy of query params safe to log."""
    return {k: ('***' if k in secret_keys else v) for k, v in params.items()}
