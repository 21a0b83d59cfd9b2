"""dialogflow-intent -- normalized Dialogflow intent responses.

Public API re-exports for convenient access::

    from dialogflow_intent import IntentResponse, parse, UNKNOWN_INTENT
    from dialogflow_intent import IntentObserver, ResponseRouter
"""

from dialogflow_intent.errors import DialogflowIntentError, ResponseDecodeError
from dialogflow_intent.models.response import UNKNOWN_INTENT, IntentResponse, ResponseKind
from dialogflow_intent.observer import IntentObserver
from dialogflow_intent.parser import (
    classify,
    decode_response,
    extract_display_name,
    is_end_of_utterance,
    is_intent_detected,
    parse,
    parse_json,
)
from dialogflow_intent.router import ResponseRouter

__all__ = [
    # Parsing
    "parse",
    "parse_json",
    "decode_response",
    "extract_display_name",
    "classify",
    "is_intent_detected",
    "is_end_of_utterance",
    # Models
    "IntentResponse",
    "ResponseKind",
    "UNKNOWN_INTENT",
    # Routing
    "IntentObserver",
    "ResponseRouter",
    # Errors
    "DialogflowIntentError",
    "ResponseDecodeError",
]
