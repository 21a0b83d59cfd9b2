"""Shared test fixtures and helpers for dialogflow-intent tests.

Provides factories for Dialogflow responses in the shapes the parser
accepts, and a recording observer for routing tests.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from dialogflow_intent.observer import IntentObserver


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def make_response_dict(
    display_name: str | None = "book_flight",
    message_type: str | None = None,
) -> dict[str, Any]:
    """Create a REST-style (camelCase) StreamingDetectIntentResponse."""
    response: dict[str, Any] = {
        "queryResult": {"intent": {"displayName": display_name}},
    }
    if message_type is not None:
        response["recognitionResult"] = {"messageType": message_type}
    return response


def make_response_message(
    display_name: str = "",
    message_type: Any = 0,
) -> SimpleNamespace:
    """Create an attribute-style response shaped like a proto message.

    Unset string fields default to ``""`` and unset enums to ``0``, as
    they do on real protobuf messages.
    """
    return SimpleNamespace(
        query_result=SimpleNamespace(
            intent=SimpleNamespace(display_name=display_name),
        ),
        recognition_result=SimpleNamespace(message_type=message_type),
    )


# ---------------------------------------------------------------------------
# Observers
# ---------------------------------------------------------------------------


class RecordingObserver(IntentObserver):
    """Observer that records every callback as ``(name, argument)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def on_start(self, router) -> None:
        self.calls.append(("on_start", None))

    def on_response(self, router, response) -> None:
        self.calls.append(("on_response", response))

    def on_response_intent(self, router, response) -> None:
        self.calls.append(("on_response_intent", response))

    def on_response_end_of_utterance(self, router, response) -> None:
        self.calls.append(("on_response_end_of_utterance", response))

    def on_error(self, router, exc) -> None:
        self.calls.append(("on_error", exc))

    def on_complete(self, router) -> None:
        self.calls.append(("on_complete", None))


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()
