from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from diagnostics.logging_setup import get_logger

from .messages import MessageEnvelope

logger = get_logger("runtime_bus")

Handler = Callable[[MessageEnvelope], None]


def _iso_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class RuntimeBus:
    """In-process pub/sub; handlers run synchronously on the publisher's thread."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, tuple[str, Handler]] = {}
        self._topic_index: Dict[str, List[str]] = {}
        self._history: List[MessageEnvelope] = []
        self.history_limit = 64

    def subscribe(self, topic: str, handler: Handler) -> str:
        sub_id = str(uuid.uuid4())
        self._subscribers[sub_id] = (topic, handler)
        self._topic_index.setdefault(topic, []).append(sub_id)
        return sub_id

    def unsubscribe(self, sub_id: str) -> None:
        topic, _ = self._subscribers.pop(sub_id, (None, None))
        if topic and topic in self._topic_index:
            subs = self._topic_index[topic]
            if sub_id in subs:
                subs.remove(sub_id)
            if not subs:
                self._topic_index.pop(topic, None)

    def publish(
        self,
        topic: str,
        payload: Optional[Dict[str, object]],
        source: str,
        trace_id: Optional[str] = None,
    ) -> MessageEnvelope:
        envelope = self._build_envelope(topic, payload, source, trace_id)
        self._history.append(envelope)
        if len(self._history) > self.history_limit:
            del self._history[: len(self._history) - self.history_limit]
        for handler in self._copy_handlers(topic):
            try:
                handler(envelope)
            except Exception:
                logger.exception("runtime_bus handler error on %s", topic)
        return envelope

    def recent(self, topic: Optional[str] = None) -> List[MessageEnvelope]:
        if topic is None:
            return list(self._history)
        return [env for env in self._history if env.type == topic]

    def _build_envelope(
        self,
        topic: str,
        payload: Optional[Dict[str, object]],
        source: str,
        trace_id: Optional[str],
    ) -> MessageEnvelope:
        body = payload if isinstance(payload, dict) else {}
        return MessageEnvelope(
            msg_id=str(uuid.uuid4()),
            type=topic,
            timestamp=_iso_timestamp(),
            source=source,
            payload=dict(body),
            trace_id=trace_id or str(uuid.uuid4()),
        )

    def _copy_handlers(self, topic: str) -> List[Handler]:
        sub_ids = list(self._topic_index.get(topic, ()))
        return [self._subscribers[sid][1] for sid in sub_ids if sid in self._subscribers]
