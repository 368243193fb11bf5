import logging
import os

"""
This variable keeps track of whether a handler has been attached to the root logger or not. We only want one handler
to be attached to the root logger since we only emit the message in one location. Child loggers will have no handler
since log message are propagated up to the root logger's handler by default.
"""
_root_logging_configured = False


def _log_level():
    return getattr(logging, os.environ.get('LOG_LEVEL', 'WARNING').upper())


def get_logger(name):
    return logging.getLogger(name)


def configure_logger():
    """
    Configures a root logger at the level named by the LOG_LEVEL environment variable.

    If a root logger is already configured (indicated by the global variable _root_logging_configured) or if the root
    logger already has a handler, then return without adding any new handlers.
    """
    global _root_logging_configured
    root_logger = logging.getLogger()

    if _root_logging_configured:
        root_logger.info(
            "Root logger was already configured in this interpreter process. The currently registered handlers, "
            "formatters, filters, and log levels will be left as is.")
        return
    if root_logger.hasHandlers():
        root_logger.warning(
            "Root logger somehow already has a handler attached in this interpreter process. The currently registered "
            "handlers, formatters, filters, and log levels will be left as is.")
        return

    logging.basicConfig(level=_log_level())
    _root_logging_configured = True
