"""Turn :class:`ChangeEvent` instances into websocket frames."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any

from pydantic.alias_generators import to_camel

from app.domain.entities import ChangeEvent, DeletedResource, User

# Never leave the server, even hashed.
_PRIVATE_FIELDS: dict[type, frozenset[str]] = {User: frozenset({"password"})}


def serialize_record(record: Any) -> dict[str, Any]:
    """Return a JSON-serializable, camelCase representation of ``record``."""

    if not is_dataclass(record):
        raise TypeError(f"Cannot serialize {type(record).__name__}")
    hidden = _PRIVATE_FIELDS.get(type(record), frozenset())
    data = asdict(record)
    if isinstance(record, DeletedResource) and record.article_id is None:
        data.pop("article_id")
    return {
        to_camel(key): _normalize_value(value)
        for key, value in data.items()
        if key not in hidden
    }


def serialize_payload(event: ChangeEvent) -> Any:
    """Return the ``data`` member of the frame for ``event``."""

    payload = event.payload
    if payload is None:
        return None
    if isinstance(payload, tuple):
        return [serialize_record(item) for item in payload]
    return serialize_record(payload)


def build_message(event: ChangeEvent) -> dict[str, Any]:
    """Return the ``{"type", "data"}`` frame for ``event``.

    ``data_cleared`` frames carry the type only.
    """

    message: dict[str, Any] = {"type": event.event_type}
    data = serialize_payload(event)
    if data is not None:
        message["data"] = data
    return message


def serialize_change_event(event: ChangeEvent) -> str:
    """Return the JSON text sent to every connected client."""

    return json.dumps(build_message(event), ensure_ascii=False, separators=(",", ":"))


def _normalize_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


__all__ = [
    "build_message",
    "serialize_change_event",
    "serialize_payload",
    "serialize_record",
]
