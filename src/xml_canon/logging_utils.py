"""Logging setup for the command-line scripts."""

import logging

PACKAGE_LOGGER = "xml_canon"

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


class ModuleNameFormatter(logging.Formatter):
    """Formatter that shows module names relative to the package.

    ``xml_canon.pipeline`` is shown as ``pipeline``; the package logger
    itself is shown with an empty name.
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.name == PACKAGE_LOGGER or record.name.startswith(PACKAGE_LOGGER + "."):
            record.name = record.name[len(PACKAGE_LOGGER) :].lstrip(".")
        return super().format(record)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route package log records to stderr.

    Args:
        verbose: Show debug messages for every pipeline stage. Otherwise
            only warnings and errors are shown.

    Returns:
        The package logger.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(ModuleNameFormatter(LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Replace a handler from an earlier call instead of stacking them
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
