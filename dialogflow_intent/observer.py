"""Observer interface for streamed intent detection responses.

Callbacks are delivered by ``ResponseRouter`` in a guaranteed order:

* exactly one :meth:`IntentObserver.on_start`
* zero or more :meth:`~IntentObserver.on_response`,
  :meth:`~IntentObserver.on_response_intent`,
  :meth:`~IntentObserver.on_response_end_of_utterance`
* exactly one :meth:`~IntentObserver.on_error` or
  :meth:`~IntentObserver.on_complete`
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dialogflow_intent.router import ResponseRouter


class IntentObserver(ABC):
    """Abstract base class for intent detection observers.

    Subclasses must implement :meth:`on_response_intent`.  The other
    callbacks default to no-ops.
    """

    def on_start(self, router: ResponseRouter) -> None:
        """Called once before the first response is routed."""

    def on_response(self, router: ResponseRouter, response: Any) -> None:
        """Called for every response, including intermediate ones."""

    @abstractmethod
    def on_response_intent(self, router: ResponseRouter, response: Any) -> None:
        """Called when the server has detected an intent.

        To process all intermediate results use :meth:`on_response`
        instead.
        """
        ...

    def on_response_end_of_utterance(
        self, router: ResponseRouter, response: Any
    ) -> None:
        """Called when the server has detected the end of the user's
        utterance and expects no additional input."""

    def on_error(self, router: ResponseRouter, exc: BaseException) -> None:
        """Called when the response source fails."""

    def on_complete(self, router: ResponseRouter) -> None:
        """Called when the response source is exhausted or routing stopped."""
