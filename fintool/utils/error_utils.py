"""
Error handling utilities for FinTool.

This module provides centralized error handling and logging for the
calculator engine. It includes the exception hierarchy raised by the engine
and a decorator for consistent error reporting across the codebase.
"""

import os
import traceback
import logging
from functools import wraps
import sys
from datetime import datetime

# Configure logging; no file handler on serverless (read-only filesystem)
_handlers = [logging.StreamHandler(sys.stdout)]
_log_file = os.getenv("FINTOOL_LOG_FILE", "fintool.log")
if _log_file and not os.getenv("VERCEL"):
    _handlers.append(logging.FileHandler(_log_file))

logging.basicConfig(
    level=os.getenv("FINTOOL_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=_handlers,
)

logger = logging.getLogger(__name__)


class FinToolError(Exception):
    """Base exception class for FinTool errors"""

    def __init__(self, message, details=None):
        self.message = message
        self.details = details
        self.timestamp = datetime.now()
        self.logged = False
        super().__init__(self.message)


class InvalidParameterError(FinToolError, ValueError):
    """A calculator precondition was violated by the caller."""

    def __init__(self, message, field=None, value=None):
        details = {"field": field, "value": value} if field else None
        super().__init__(message, details)
        self.field = field
        self.value = value


def error_handler(func):
    """Decorator for handling errors and providing detailed information.

    Engine errors (``FinToolError`` and subclasses) are logged and re-raised
    untouched so callers can tell bad input from a genuine failure. Anything
    else is wrapped into a ``FinToolError`` carrying the failure location.
    Each error is logged once, by the decorated call closest to where it
    was raised.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FinToolError as e:
            # decorated calls nest; only the innermost one logs
            if not e.logged:
                logger.info(f"{func.__name__} rejected input: {e.message}")
                e.logged = True
            raise
        except Exception as e:
            exc_type, exc_value, exc_tb = sys.exc_info()
            tb = traceback.extract_tb(exc_tb)

            # Get the most relevant parts of the traceback
            error_location = f"{tb[-1].filename}:{tb[-1].lineno}"
            error_function = tb[-1].name

            error_details = {
                "error_type": exc_type.__name__,
                "location": error_location,
                "function": error_function,
                "arguments": {"args": str(args), "kwargs": str(kwargs)},
                "traceback": traceback.format_exc(),
            }

            logger.error(f"Error in {error_location} - {error_function}: {str(e)}")
            logger.debug(f"Detailed error information: {error_details}")

            wrapped = FinToolError(
                f"Error in {error_function} at {error_location}: {str(e)}",
                error_details,
            )
            wrapped.logged = True
            raise wrapped from e

    return wrapper


# Module metadata
__version__ = "1.0.0"
__author__ = "FinTool Development Team"
__description__ = "Error handling utilities for FinTool"
