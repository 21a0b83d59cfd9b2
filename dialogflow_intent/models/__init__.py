"""dialogflow-intent data models."""

from dialogflow_intent.models.response import UNKNOWN_INTENT, IntentResponse, ResponseKind

__all__ = ["UNKNOWN_INTENT", "IntentResponse", "ResponseKind"]
