import asyncio
import json
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import requests

from yoiu.errors import ExtractionError, TxNotFoundError

STATUS_OK = "ok"
STATUS_ERROR = "error"


@dataclass
class Event:
    type: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class TxRecord:
    """Confirmed outcome of a transaction, fetched by hash after broadcast."""
    hash: str
    status: str
    events: List[Event] = field(default_factory=list)
    raw_log: str = ""

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @classmethod
    def from_explorer(cls, payload: dict) -> "TxRecord":
        """Parse an Injective explorer `txs/{hash}` response.

        The explorer wraps the record as `{"s": "ok", "data": {...}}`; only the
        first message log's events are kept, matching how a single-message
        upload or instantiate reports its result.
        """
        data = payload.get("data") or {}
        status = payload.get("s", STATUS_ERROR)
        if status == STATUS_OK and data.get("code", 0) != 0:
            status = STATUS_ERROR
        events = []
        logs = data.get("logs") or []
        if logs:
            for event in logs[0].get("events") or []:
                events.append(Event(
                    type=event.get("type", ""),
                    attributes=[(a.get("key", ""), a.get("value", "")) for a in event.get("attributes") or []],
                ))
        return cls(
            hash=data.get("hash", ""),
            status=status,
            events=events,
            raw_log=data.get("errorLog") or payload.get("errmsg", ""),
        )

    @classmethod
    def from_tx_response(cls, response) -> "TxRecord":
        """Normalize a cosmpy `TxResponse`."""
        if response.logs:
            source = response.logs[0].events
        else:
            source = response.events
        events = [Event(type=name, attributes=list(attrs.items())) for name, attrs in source.items()]
        return cls(
            hash=response.hash,
            status=STATUS_OK if response.code == 0 else STATUS_ERROR,
            events=events,
            raw_log=response.raw_log or "",
        )


@dataclass(frozen=True)
class KeyValue:
    value: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    def unwrap(self) -> str:
        if not self.ok:
            raise ExtractionError(self.reason)
        return self.value

    def value_or(self, default=None):
        return self.value if self.ok else default


def _unquote(value: str) -> str:
    # typed events carry JSON encoded values, e.g. "\"42\""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        try:
            return json.loads(value)
        except ValueError:
            return value
    return value


def get_key_value(record: TxRecord, event_type: str, key: str) -> KeyValue:
    if record.status != STATUS_OK:
        return KeyValue(reason=f"transaction {record.hash} status is {record.status!r}")
    for event in record.events:
        if event.type == event_type:
            for attr_key, attr_value in event.attributes:
                if attr_key == key:
                    return KeyValue(value=_unquote(attr_value))
            return KeyValue(reason=f"attribute {key!r} not found in event {event_type!r}")
    return KeyValue(reason=f"event {event_type!r} not found in transaction {record.hash}")


def get_tx_info(tx_hash: str, explorer_url: str, timeout: float = 10.0) -> dict:
    url = f"{explorer_url}/api/explorer/v1/txs/{tx_hash}"
    response = requests.get(url, headers={"Content-Type": "application/json"}, timeout=timeout)
    return response.json()


async def wait_for_tx(tx_hash: str, explorer_url: str, poll_interval: float = 2.0, timeout: float = 60.0) -> TxRecord:
    """Poll the explorer until it has indexed `tx_hash`.

    A record the explorer reports as failed is returned as-is; only a record
    that never shows up within `timeout` raises.
    """
    deadline = time.monotonic() + timeout
    while True:
        payload = await asyncio.to_thread(get_tx_info, tx_hash, explorer_url)
        if payload.get("s") == STATUS_OK:
            return TxRecord.from_explorer(payload)
        if time.monotonic() >= deadline:
            raise TxNotFoundError(tx_hash, timeout)
        await asyncio.sleep(poll_interval)
