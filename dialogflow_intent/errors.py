"""dialogflow-intent error hierarchy.

All exceptions raised by this package inherit from
``DialogflowIntentError`` so callers can catch a single base class.

Parsing a response never raises: a missing response or a missing
intent is reported as ``UNKNOWN_INTENT`` instead.  Errors only occur
when a raw payload has to be decoded first.
"""

from __future__ import annotations


class DialogflowIntentError(Exception):
    """Base exception for all dialogflow-intent errors."""


class ResponseDecodeError(DialogflowIntentError):
    """Raised when a raw response payload cannot be decoded."""
