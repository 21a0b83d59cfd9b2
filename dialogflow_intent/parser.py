"""Dialogflow response parsing.

Converts an optional ``StreamingDetectIntentResponse`` into an
``IntentResponse``.  Responses are accepted in either shape the Python
client ecosystem produces them:

* message objects (``google.cloud.dialogflow_v2`` proto-plus messages
  or raw protobuf messages), read through snake_case attributes;
* mappings, e.g. a decoded REST payload (camelCase keys) or the output
  of ``StreamingDetectIntentResponse.to_dict()`` (snake_case keys).

Usage::

    from dialogflow_intent import parse

    intent = parse(response)
    if intent.intent_name == "book_flight":
        ...

Every step along ``queryResult.intent.displayName`` tolerates a missing
node, so ``parse()`` never raises.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from dialogflow_intent.errors import ResponseDecodeError
from dialogflow_intent.models.response import UNKNOWN_INTENT, IntentResponse, ResponseKind

_DISPLAY_NAME_PATH = (
    ("queryResult", "query_result"),
    ("intent", "intent"),
    ("displayName", "display_name"),
)

_MESSAGE_TYPE_PATH = (
    ("recognitionResult", "recognition_result"),
    ("messageType", "message_type"),
)

_END_OF_SINGLE_UTTERANCE = "END_OF_SINGLE_UTTERANCE"
_END_OF_SINGLE_UTTERANCE_VALUE = 2


def _field(node: Any, camel: str, snake: str) -> Any:
    """Read one field of a message or mapping, or ``None`` if absent."""
    if node is None:
        return None
    if isinstance(node, Mapping):
        value = node.get(camel)
        if value is None:
            value = node.get(snake)
        return value
    return getattr(node, snake, None)


def _resolve(node: Any, path: tuple[tuple[str, str], ...]) -> Any:
    for camel, snake in path:
        node = _field(node, camel, snake)
        if node is None:
            return None
    return node


def extract_display_name(response: Any) -> str | None:
    """Return ``queryResult.intent.displayName``, or ``None`` if absent.

    Empty strings are returned as-is; non-string leaves count as absent.
    """
    value = _resolve(response, _DISPLAY_NAME_PATH)
    if isinstance(value, str):
        return value
    return None


def parse(response: Any | None) -> IntentResponse:
    """Convert a detected-intent response to an ``IntentResponse``.

    Parameters
    ----------
    response:
        A ``StreamingDetectIntentResponse`` (message or mapping), or
        ``None`` when no response is available.

    Returns
    -------
    IntentResponse
        ``intent_name`` is the display name verbatim, or
        ``UNKNOWN_INTENT`` if the response or its display name is
        missing or empty.  ``orig_response`` is ``response`` itself.
    """
    if response is None:
        return IntentResponse(UNKNOWN_INTENT, None)
    intent_name = extract_display_name(response)
    return IntentResponse(intent_name or UNKNOWN_INTENT, response)


def is_intent_detected(response: Any | None) -> bool:
    """Whether the response carries a non-empty intent display name."""
    return bool(extract_display_name(response))


def is_end_of_utterance(response: Any | None) -> bool:
    """Whether the response marks the end of a single utterance.

    The message type may be the enum name (JSON payloads), an enum
    member (proto-plus), or the bare wire value (raw protobuf).
    """
    value = _resolve(response, _MESSAGE_TYPE_PATH)
    if value is None:
        return False
    if isinstance(value, str):
        return value == _END_OF_SINGLE_UTTERANCE
    name = getattr(value, "name", None)
    if isinstance(name, str):
        return name == _END_OF_SINGLE_UTTERANCE
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and value == _END_OF_SINGLE_UTTERANCE_VALUE
    )


def classify(response: Any | None) -> ResponseKind:
    """Classify a streaming response for routing.

    A detected intent takes precedence over the end-of-utterance marker.
    """
    if is_intent_detected(response):
        return ResponseKind.INTENT
    if is_end_of_utterance(response):
        return ResponseKind.END_OF_UTTERANCE
    return ResponseKind.INTERMEDIATE


def decode_response(payload: str | bytes) -> dict[str, Any]:
    """Decode a raw JSON response body.

    Raises
    ------
    ResponseDecodeError
        If ``payload`` is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(payload)
    except ValueError as exc:
        raise ResponseDecodeError(f"Invalid response payload: {exc}") from exc
    if not isinstance(data, dict):
        raise ResponseDecodeError(
            f"Invalid response payload: expected a JSON object, got {type(data).__name__}"
        )
    return data


def parse_json(payload: str | bytes) -> IntentResponse:
    """Decode a raw JSON response body and parse it."""
    return parse(decode_response(payload))
