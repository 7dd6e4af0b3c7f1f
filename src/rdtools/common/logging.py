"""Logging initialisation code."""

import logging
import logging.handlers
import os
import sys
import time

from rdtools.common.config import LoggingConfig

FILE_FORMATTER = "%(asctime)s: %(name)s: %(levelname)s %(message)s"
SYSLOG_FORMATTER = "%(name)s: %(levelname)s %(message)s"


def logfile_name(progname: str, directory: str = ".") -> str:
    """Return a unique log file name for this invocation of a program."""
    return os.path.join(
        directory, f"{progname}-{time.strftime('%Y%m%d-%H%M%S')}-{os.getpid()}.log"
    )


def get_logger(
    progname: str, debug: bool = False, config: LoggingConfig | None = None
) -> logging.Logger:
    """
    Initialize the root logger for a command line tool.

    Log messages go to stderr. Unless debugging, only warnings and errors are
    shown when stderr is not a terminal (e.g. when output is piped).
    """
    if config is None:
        config = LoggingConfig()
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, stream=sys.stderr, format=FILE_FORMATTER)
    logger = logging.getLogger()
    if not sys.stderr.isatty() and not debug:
        for this_h in logger.handlers:
            this_h.setLevel(logging.WARNING)
    if config.syslog:
        syslog_h = logging.handlers.SysLogHandler()
        syslog_h.setFormatter(logging.Formatter(SYSLOG_FORMATTER))
        logger.addHandler(syslog_h)
    if config.filelog:
        file_h = logging.FileHandler(logfile_name(progname, config.filelog_dir))
        file_h.setFormatter(logging.Formatter(FILE_FORMATTER))
        logger.addHandler(file_h)
    return logger
