"""ResponseRouter -- dispatches streamed responses to an observer.

The router consumes responses produced elsewhere (an iterable or async
iterable, typically the response side of a streaming detect-intent
call) and turns each one into the matching ``IntentObserver``
callbacks.  It never opens, feeds, or closes the stream itself.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Iterable
from typing import Any

from dialogflow_intent.models.response import IntentResponse, ResponseKind
from dialogflow_intent.observer import IntentObserver
from dialogflow_intent.parser import classify, parse

logger = logging.getLogger(__name__)

_DEFAULT_SINGLE_UTTERANCE = True


class ResponseRouter:
    """Routes detect-intent responses to an ``IntentObserver``.

    Parameters
    ----------
    observer:
        Receives the routing callbacks.
    single_utterance:
        If ``True``, stop consuming responses after the first one that
        carries an intent or marks the end of the utterance.  This
        matches a stream opened with ``single_utterance=True``.
    """

    def __init__(
        self,
        observer: IntentObserver,
        single_utterance: bool = _DEFAULT_SINGLE_UTTERANCE,
    ) -> None:
        if not isinstance(observer, IntentObserver):
            raise TypeError(
                f"observer must be an IntentObserver, got {type(observer).__name__}"
            )
        self._observer = observer
        self._single_utterance = single_utterance
        self._stop_requested = False
        self._last_response: Any | None = None
        self._last_intent_response: Any | None = None

    @property
    def observer(self) -> IntentObserver:
        return self._observer

    @property
    def single_utterance(self) -> bool:
        return self._single_utterance

    @property
    def stop_requested(self) -> bool:
        """Whether routing will stop before the next response."""
        return self._stop_requested

    def request_stop(self) -> None:
        """Stop consuming responses; the route ends with ``on_complete``."""
        if not self._stop_requested:
            logger.debug("Stop requested")
        self._stop_requested = True

    def dispatch(self, response: Any) -> ResponseKind:
        """Deliver a single response to the observer.

        ``on_response`` is always called first, followed by
        ``on_response_intent`` or ``on_response_end_of_utterance`` when
        the response is final.
        """
        kind = classify(response)
        logger.debug("Dispatching %s response", kind.value)

        self._last_response = response
        self._observer.on_response(self, response)

        if kind is ResponseKind.INTENT:
            self._last_intent_response = response
            if self._single_utterance:
                self.request_stop()
            self._observer.on_response_intent(self, response)
        elif kind is ResponseKind.END_OF_UTTERANCE:
            if self._single_utterance:
                self.request_stop()
            self._observer.on_response_end_of_utterance(self, response)

        return kind

    def route(self, responses: Iterable[Any]) -> IntentResponse:
        """Consume ``responses`` and dispatch each one to the observer.

        Returns
        -------
        IntentResponse
            Parsed from the last response carrying an intent, or from
            the last response seen if none did.

        Exceptions raised by the response source are passed to
        ``on_error`` and not re-raised.  Exceptions raised by the
        observer propagate.
        """
        iterator = iter(responses)
        self._begin()
        while not self._stop_requested:
            try:
                response = next(iterator)
            except StopIteration:
                break
            except Exception as exc:
                self._fail(exc)
                return self._result()
            self.dispatch(response)

        self._complete()
        return self._result()

    async def route_async(self, responses: AsyncIterable[Any]) -> IntentResponse:
        """Async counterpart of :meth:`route` for async iterables."""
        iterator = responses.__aiter__()
        self._begin()
        while not self._stop_requested:
            try:
                response = await iterator.__anext__()
            except StopAsyncIteration:
                break
            except Exception as exc:
                self._fail(exc)
                return self._result()
            self.dispatch(response)

        self._complete()
        return self._result()

    def _begin(self) -> None:
        self._stop_requested = False
        self._last_response = None
        self._last_intent_response = None
        logger.debug("Routing started (single_utterance=%s)", self._single_utterance)
        self._observer.on_start(self)

    def _fail(self, exc: Exception) -> None:
        logger.exception("Response stream failed")
        self._observer.on_error(self, exc)

    def _complete(self) -> None:
        logger.debug("Routing complete")
        self._observer.on_complete(self)

    def _result(self) -> IntentResponse:
        if self._last_intent_response is not None:
            return parse(self._last_intent_response)
        return parse(self._last_response)
