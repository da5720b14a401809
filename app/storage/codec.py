"""JSON encoding of the stored record list."""

import json

from app.logging.logger import Log
from app.records.models import NormalizedRecord


def encode_records(records: list[NormalizedRecord]) -> str:
    return json.dumps([record.to_dict() for record in records], ensure_ascii=False)


def decode_records(raw: str | None, source: str) -> list[NormalizedRecord]:
    """Decode a stored JSON array, recovering from bad content.

    Absent, blank, non-JSON or non-array payloads decode to an empty list.
    Entries that do not describe a record are skipped.
    """
    if raw is None or not raw.strip():
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        Log.warning(f"Ignoring corrupted store {source}: {exc}")
        return []
    if not isinstance(parsed, list):
        Log.warning(f"Ignoring store {source}: expected a JSON array")
        return []

    records: list[NormalizedRecord] = []
    for index, item in enumerate(parsed):
        if not isinstance(item, dict):
            Log.warning(f"Skipping entry {index} in {source}: not an object")
            continue
        try:
            records.append(NormalizedRecord.from_dict(item))
        except ValueError as exc:
            Log.warning(f"Skipping entry {index} in {source}: {exc}")
    return records
