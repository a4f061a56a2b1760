"""tdcache Export - JSON and parquet views of decoded cache records."""
from .serialize import canonical_json, to_jsonable
from .tables import record_frame, write_parquet

__all__ = ["canonical_json", "to_jsonable", "record_frame", "write_parquet"]
