"""IntentResponse dataclass -- output of ``parser.parse()``."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

UNKNOWN_INTENT = "unknown"
"""Intent name used when Dialogflow could not infer any intent.

This most commonly happens when no intent is defined for the uttered
command, or when the audio quality is too poor to recognize it.
"""


@dataclass(frozen=True)
class IntentResponse:
    """Optional wrapper of a Dialogflow detect-intent response.

    For convenience the detected intent name is parsed and stored in
    ``intent_name``.  Everything else is available on ``orig_response``.
    """

    intent_name: str
    """Intent display name, or ``UNKNOWN_INTENT``."""

    orig_response: Any | None = None
    """Original Dialogflow response, or ``None`` if there was none."""

    @property
    def is_unknown(self) -> bool:
        """Whether no intent was recognized."""
        return self.intent_name == UNKNOWN_INTENT


class ResponseKind(str, enum.Enum):
    """How a single streaming response should be routed."""

    INTENT = "intent"
    END_OF_UTTERANCE = "end_of_utterance"
    INTERMEDIATE = "intermediate"
