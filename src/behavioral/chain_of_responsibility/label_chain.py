"""
Chain of Responsibility (Behavioral): label matching

Intent:
    Pass a textual request along a fixed chain of handlers; each handler
    either processes a request carrying its own label or forwards it,
    unchanged, to the next handler.

Participants:
    - Handler (abstract): keeps the next reference and the default forwarding.
    - LabelHandler (abstract): match-or-delegate template shared by concrete handlers.
    - HandlerA / HandlerB / HandlerC: concrete handlers matching "A", "B", "C".
    - Client: `build_default_chain` + `run_demo` wire A -> B -> C and send requests.

Notes:
    - A request nobody matches is dropped silently at the end of the chain.
    - A and B print a marker line before checking the label; C does not.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, List, Optional, TextIO

logger = logging.getLogger(__name__)


# ---------- Errors ----------

class ChainError(RuntimeError):
    """
    Raised when handlers cannot be wired into a valid chain.
    """


class ChainCycleError(ChainError):
    """
    Raised when a new link would make the chain loop back on itself.
    """


# ---------- Chain Base ----------

class Handler(ABC):
    """Abstract handler defining the chaining protocol.

    :param stream: Text stream for handler output; stdout when None.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._next: Optional[Handler] = None
        self._stream = stream

    @property
    def successor(self) -> Optional[Handler]:
        """
        :return: The next handler in the chain, or None at the end.
        """
        return self._next

    def set_next(self, handler: Optional[Handler]) -> Optional[Handler]:
        """Set the next handler in a fluent manner and return it.

        Replaces any previous successor. None marks the end of the chain.

        :param handler: The next handler to delegate to.
        :return: The same handler to allow fluent chain building.
        :raises ChainCycleError: If the link would close a cycle.
        """
        node = handler
        while node is not None:
            if node is self:
                raise ChainCycleError(f"Linking {handler!r} after {self!r} creates a cycle")
            node = node.successor
        self._next = handler
        return handler

    @abstractmethod
    def handle(self, request: str) -> Optional[Handler]:
        """Process the request or delegate it to the next handler.

        :param request: Request label.
        :return: The handler that processed the request, or None if it was dropped.
        """
        raise NotImplementedError

    def _delegate(self, request: str) -> Optional[Handler]:
        """Delegate handling to the next handler if present.

        :param request: Request label, passed on unchanged.
        :return: Next handler's result, or None when there is no next handler.
        """
        if self._next is not None:
            logger.debug("%s forwards %r to %s", self, request, self._next)
            return self._next.handle(request)
        logger.debug("%s is the end of the chain, dropping %r", self, request)
        return None

    def _emit(self, line: str) -> None:
        print(line, file=self._stream)

    def __repr__(self) -> str:
        return type(self).__name__


class LabelHandler(Handler):
    """Processes requests equal to `label`, forwards everything else.

    Subclasses only declare the class-level `label` and optional `marker`.
    The marker is printed on every visit, before the label is checked.
    """

    label: ClassVar[str]
    marker: ClassVar[Optional[str]] = None

    def handle(self, request: str) -> Optional[Handler]:
        if self.marker is not None:
            self._emit(self.marker)

        if request == self.label:
            self._emit(f"Handler {self.label} processed the request.")
            logger.debug("%s processed %r", self, request)
            return self

        return self._delegate(request)


# ---------- Concrete Handlers ----------

class HandlerA(LabelHandler):
    """Handles "A"; prints a dashed marker on every visit."""

    label = "A"
    marker = "-----"


class HandlerB(LabelHandler):
    """Handles "B"; prints a double-line marker on every visit."""

    label = "B"
    marker = "======"


class HandlerC(LabelHandler):
    """Handles "C"; prints no marker."""

    label = "C"


# ---------- Builder & Demo ----------

DEFAULT_REQUESTS = ("A", "B", "C")


def link(*handlers: Handler) -> Handler:
    """Link handlers in the given order and return the head.

    :param handlers: Handlers, head first.
    :return: The first handler.
    :raises ValueError: If no handlers are given.
    """
    if not handlers:
        raise ValueError("link() needs at least one handler")
    for current, nxt in zip(handlers, handlers[1:]):
        current.set_next(nxt)
    return handlers[0]


def build_default_chain(stream: Optional[TextIO] = None) -> Handler:
    """Build the canonical chain (A → B → C).

    :param stream: Output stream shared by all handlers; stdout when None.
    :return: The head of the handler chain.
    """
    head = HandlerA(stream)
    head.set_next(HandlerB(stream)).set_next(HandlerC(stream))
    return head


def run_demo(requests: Iterable[str] = DEFAULT_REQUESTS,
             stream: Optional[TextIO] = None) -> List[Optional[Handler]]:
    """Send each request, in order, to the head of a fresh default chain.

    :param requests: Request labels to issue.
    :param stream: Output stream; stdout when None.
    :return: Per-request results (processing handler or None).
    """
    head = build_default_chain(stream)
    return [head.handle(request) for request in requests]


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()


__all__ = [
    "ChainError",
    "ChainCycleError",
    "Handler",
    "LabelHandler",
    "HandlerA",
    "HandlerB",
    "HandlerC",
    "DEFAULT_REQUESTS",
    "link",
    "build_default_chain",
    "run_demo",
    "main",
]
