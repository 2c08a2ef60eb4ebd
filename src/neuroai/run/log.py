"""
NeuroAI Logging Module

The library only creates module level loggers and never configures logging on
import. Applications (trials, example scripts) call setup_logger() to route
the records somewhere.
"""

import logging

LOG_FORMAT = "[%(asctime)s][%(processName)s][%(levelname)s] %(message)s"

def setup_logger(name: str = "neuroai", log_file: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler (and optionally a file handler) to a logger.
    Handlers left by an earlier call are removed first, so calling it again
    reconfigures the logger instead of duplicating its output.

    Parameters:
        name:     name of the logger to configure ("neuroai" covers the whole package)
        log_file: if given, records of every level are also written to this file
        level:    minimum level of the records shown on the console

    Returns:
        the configured logger
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG if log_file else level)

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
