"""Flatten decoded cache records into tables and write them as parquet."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from tdcache_decode.dispatch import CacheRecord, FixedList, LocationList, UserSettingsList
from tdcache_decode.records import CachedFile, ReportSpamStatus

from .serialize import canonical_json

CACHED_FILE_SCHEMA = pa.schema(
    [
        ("position", pa.int32()),
        ("file_key", pa.uint64()),
        ("location_first", pa.uint64()),
        ("location_second", pa.uint64()),
        ("size", pa.int32()),
    ]
)

REPORT_SPAM_SCHEMA = pa.schema(
    [
        ("position", pa.int32()),
        ("peer_id", pa.uint64()),
        ("status", pa.int32()),
    ]
)

LOCATION_SCHEMA = pa.schema(
    [
        ("position", pa.int32()),
        ("location_type", pa.uint32()),
        ("dc_id", pa.uint32()),
        ("id", pa.uint64()),
        ("filename", pa.string()),
        ("modified", pa.string()),
        ("size", pa.uint32()),
    ]
)

SETTINGS_SCHEMA = pa.schema(
    [
        ("position", pa.int32()),
        ("block_id", pa.uint32()),
        ("name", pa.string()),
        ("value", pa.string()),
    ]
)


def _rows(result: CacheRecord) -> tuple[list[dict], pa.Schema]:
    if isinstance(result, LocationList):
        rows = [
            {
                "position": pos,
                "location_type": loc.media_key.location_type,
                "dc_id": loc.media_key.dc_id,
                "id": loc.media_key.id,
                "filename": loc.filename,
                "modified": loc.modified.isoformat() if loc.modified is not None else None,
                "size": loc.size,
            }
            for pos, loc in enumerate(result.locations)
        ]
        return rows, LOCATION_SCHEMA

    if isinstance(result, UserSettingsList):
        rows = [
            {
                "position": pos,
                "block_id": int(setting.field),
                "name": setting.name,
                "value": canonical_json(setting.value),
            }
            for pos, setting in enumerate(result.settings)
        ]
        return rows, SETTINGS_SCHEMA

    if isinstance(result, FixedList):
        rows = []
        schema = CACHED_FILE_SCHEMA
        for pos, entry in enumerate(result.entries):
            if isinstance(entry, CachedFile):
                rows.append(
                    {
                        "position": pos,
                        "file_key": entry.file_key,
                        "location_first": entry.location_first,
                        "location_second": entry.location_second,
                        "size": entry.size,
                    }
                )
            elif isinstance(entry, ReportSpamStatus):
                schema = REPORT_SPAM_SCHEMA
                rows.append({"position": pos, "peer_id": entry.peer_id, "status": entry.status})
        return rows, schema

    return [], pa.schema([])


def record_frame(result: CacheRecord) -> pd.DataFrame:
    """One row per decoded entry, ``position`` keeps on-disk order."""
    rows, schema = _rows(result)
    return pd.DataFrame(rows, columns=schema.names)


def write_parquet(result: CacheRecord, out_path: Path) -> bool:
    """Write ``result`` to ``out_path``. Returns False when there is nothing to write."""
    rows, schema = _rows(result)
    if not rows:
        return False
    df = pd.DataFrame(rows, columns=schema.names)
    table = pa.Table.from_pandas(df, schema=schema, preserve_index=False)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, out_path)
    return True
