"""Route request objects to the handler registered for their type."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from functools import partial
from typing import Any

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

Handler = Callable[[Session, Any], Any]
Behavior = Callable[[Any, Callable[[], Any]], Any]


class HandlerNotRegisteredError(RuntimeError):
    """Raised when a request type has no handler in the dispatch table."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


class Mediator:
    """Dispatch requests to exactly one handler, bound to a database session.

    ``behaviors`` wrap every handler call in the given order, the first one
    being the outermost. A behavior receives the request and a zero-argument
    callable that continues the pipeline.
    """

    def __init__(
        self,
        session: Session,
        handlers: Mapping[type, Handler],
        *,
        behaviors: Sequence[Behavior] = (),
    ) -> None:
        self.session = session
        self._handlers = dict(handlers)
        self._behaviors = tuple(behaviors)

    def send(self, request: Any) -> Any:
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotRegisteredError(type(request))

        pipeline: Callable[[], Any] = partial(handler, self.session, request)
        for behavior in reversed(self._behaviors):
            pipeline = partial(behavior, request, pipeline)
        return pipeline()


def log_request(request: Any, next_: Callable[[], Any]) -> Any:
    """Log each dispatched request together with how long it took."""

    name = type(request).__name__
    started = time.perf_counter()
    try:
        result = next_()
    except Exception:
        logger.info(
            "%s failed after %.1f ms", name, (time.perf_counter() - started) * 1000
        )
        raise
    logger.info("%s handled in %.1f ms", name, (time.perf_counter() - started) * 1000)
    return result


__all__ = ["Behavior", "Handler", "HandlerNotRegisteredError", "Mediator", "log_request"]
