"""Document write triggers.

Handlers subscribe to a document path pattern such as ``rankings/{puzzle_id}``
and are invoked once for every write (create, update or delete) to a matching
document. Each invocation gets its own session, so invocations for the same
document are independent of one another and unordered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from sqlalchemy.engine import Engine
from sqlmodel import Session

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class DocumentPattern:
    """Slash-separated path template with ``{name}`` wildcard segments."""

    def __init__(self, template: str) -> None:
        self.template = template.strip("/")
        self._segments = self.template.split("/")
        if not self.template or any(not segment for segment in self._segments):
            raise ValueError(f"Invalid document pattern: {template!r}")

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Return captured params when ``path`` matches, else ``None``."""

        parts = path.strip("/").split("/")
        if len(parts) != len(self._segments):
            return None
        params: Dict[str, str] = {}
        for segment, part in zip(self._segments, parts):
            if not part:
                return None
            if segment.startswith("{") and segment.endswith("}"):
                params[segment[1:-1]] = part
            elif segment != part:
                return None
        return params

    def __repr__(self) -> str:
        return f"DocumentPattern({self.template!r})"


@dataclass(frozen=True)
class WriteEvent:
    """A single write to a document, with its state before and after."""

    path: str
    params: Dict[str, str] = field(default_factory=dict)
    before: Optional[Document] = None
    after: Optional[Document] = None

    @property
    def kind(self) -> str:
        """``"create"``, ``"update"`` or ``"delete"``.

        A dispatch that carries neither ``before`` nor ``after`` counts as an
        ``"update"``: the document may or may not exist, and handlers are
        expected to re-read it.
        """

        if self.before is None and self.after is not None:
            return "create"
        if self.after is None and self.before is not None:
            return "delete"
        return "update"


WriteHandler = Callable[[WriteEvent, Session], Any]


class TriggerRegistry:
    """Routes document writes to the handlers registered for their path."""

    def __init__(self) -> None:
        self._handlers: List[Tuple[DocumentPattern, WriteHandler]] = []

    def on_write(self, template: str) -> Callable[[WriteHandler], WriteHandler]:
        """Decorator registering ``handler(event, session)`` for ``template``."""

        pattern = DocumentPattern(template)

        def decorator(handler: WriteHandler) -> WriteHandler:
            self._handlers.append((pattern, handler))
            return handler

        return decorator

    def handlers_for(self, path: str) -> List[Tuple[WriteHandler, Dict[str, str]]]:
        matched = []
        for pattern, handler in self._handlers:
            params = pattern.match(path)
            if params is not None:
                matched.append((handler, params))
        return matched

    def dispatch(
        self,
        path: str,
        engine: Engine,
        before: Optional[Document] = None,
        after: Optional[Document] = None,
    ) -> int:
        """Run every handler matching ``path``; return how many ran.

        Handler errors are logged and re-raised to the caller.
        """

        matched = self.handlers_for(path)
        for handler, params in matched:
            event = WriteEvent(path=path, params=params, before=before, after=after)
            logger.debug("Dispatching %s write on %s to %s", event.kind, path, handler.__name__)
            with Session(engine) as session:
                try:
                    handler(event, session)
                except Exception:
                    logger.exception("Write trigger %s failed for %s", handler.__name__, path)
                    raise
        return len(matched)


triggers = TriggerRegistry()


__all__ = [
    "Document",
    "DocumentPattern",
    "TriggerRegistry",
    "WriteEvent",
    "WriteHandler",
    "triggers",
]
