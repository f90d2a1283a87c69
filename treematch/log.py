# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class MatchError(Exception):
    """Base class for errors raised while comparing two objects."""


class NilMismatchError(MatchError, ValueError):
    pass


class SerializationError(MatchError, TypeError):
    pass


class DeltaComputationError(MatchError, ValueError):
    pass


class DeltaFormatError(DeltaComputationError):
    pass


class FilterEncodingError(MatchError, ValueError):
    pass


def init_logging(level=None):
    """Sets up logging for treematch.

    Call this from test session setup (e.g. a conftest.py).
    Sets the log level for all treematch loggers to `level`,
    or to the configured `Global.log_level` if `level` is `None`.
    """
    if level is None:
        from .config import build_config
        level = build_config('match')['log_level']
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_treematch_log_level(level, set_main=True):
    """Set a log level for treematch loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('treematch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
