from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class MessageEnvelope:
    """Envelope for every event published on the console bus."""

    msg_id: str
    type: str
    timestamp: str
    source: str
    payload: Dict[str, object] = field(default_factory=dict)
    trace_id: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "msg_id": self.msg_id,
            "type": self.type,
            "timestamp": self.timestamp,
            "source": self.source,
            "payload": dict(self.payload),
            "trace_id": self.trace_id,
        }
