from __future__ import annotations

import csv
import io
import json
import time
import uuid
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Deque, Dict, List, Optional

from . import config


def session_log_path(session_id: str) -> Path:
    return config.DATA_DIR / f"session_{session_id}.jsonl"


def append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(json.dumps(record, ensure_ascii=False) + "\n")
        fh.flush()


def flatten_record_for_csv(record: Dict[str, Any]) -> Dict[str, Any]:
    flat = dict.fromkeys(config.SCHEMA_COLUMNS, None)
    for key, value in record.items():
        if key in flat:
            flat[key] = value
    return flat


def build_csv_content(records: List[Dict[str, Any]]) -> Optional[str]:
    if not records:
        return None
    columns = list(config.SCHEMA_COLUMNS)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=columns, extrasaction="ignore")
    writer.writeheader()
    for rec in records:
        writer.writerow(flatten_record_for_csv(rec))
    return buffer.getvalue()


def build_jsonl_content(records: List[Dict[str, Any]]) -> Optional[str]:
    if not records:
        return None
    return "".join(json.dumps(rec, ensure_ascii=False) + "\n" for rec in records)


class EventLog:
    """Bounded record of user interactions, exportable as JSONL or CSV.

    Records are written for diagnostics and export only; nothing reads them
    back into the application state. When ``path`` is given every record is
    also appended to that JSONL file as it happens.
    """

    def __init__(
        self,
        session_id: Optional[str] = None,
        *,
        capacity: int = config.EVENT_LOG_CAPACITY,
        path: Optional[Path] = None,
    ) -> None:
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.path = path
        self._records: Deque[Dict[str, Any]] = deque(maxlen=capacity)
        self._seq = 0
        self._last_ms: Optional[int] = None

    def __len__(self) -> int:
        return len(self._records)

    def _next_seq_and_elapsed(self) -> Dict[str, Any]:
        now_ms = int(time.time() * 1000)
        self._seq += 1
        elapsed = 0
        if self._last_ms is not None:
            elapsed = max(now_ms - self._last_ms, 0)
        self._last_ms = now_ms
        ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return {"seq": self._seq, "elapsed_time_ms": elapsed, "t_server_iso": ts}

    def write(self, event: str, *, source: str = "system", **fields: Any) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "schema_version": config.SCHEMA_VERSION,
            "session_id": self.session_id,
            "event": event,
            "function_type": config.FUNCTION_TYPE,
            "source": source,
            "mode": config.APP_MODE,
        }
        record.update(self._next_seq_and_elapsed())
        record.update(fields)
        self._records.append(record)
        if self.path is not None:
            append_jsonl(self.path, record)
        return record

    def records(self) -> List[Dict[str, Any]]:
        return list(self._records)

    def recent(self, count: int) -> List[Dict[str, Any]]:
        if count <= 0:
            return []
        return list(self._records)[-count:]

    def to_csv(self) -> Optional[str]:
        return build_csv_content(self.records())

    def to_jsonl(self) -> Optional[str]:
        return build_jsonl_content(self.records())


def format_preview_message(record: Dict[str, Any]) -> str:
    event = record.get("event", "?")
    if event == "param_change":
        return f"{record.get('param_name')}: {record.get('old_value')} -> {record.get('new_value')}"
    if event == "probe":
        return f"probe x={record.get('x')} -> y={record.get('y')}"
    if event == "probe_rejected":
        return f"rejected probe input {record.get('new_value')!r}"
    if event == "example_load":
        return f"loaded {record.get('param_name')} (a={record.get('a')}, b={record.get('b')})"
    return str(event)
