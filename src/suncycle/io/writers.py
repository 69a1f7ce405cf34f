import json
import os
from typing import Iterable, List

import pyarrow as pa
import pyarrow.parquet as pq

from .schema import AlmanacRow

ALMANAC_SCHEMA = pa.schema([
  ("location", pa.string()),
  ("date", pa.string()),
  ("latitude", pa.float64()),
  ("longitude", pa.float64()),
  ("zenith", pa.string()),
  ("sunrise_epoch", pa.int64()),
  ("sunset_epoch", pa.int64()),
  ("sunrise_local", pa.string()),
  ("sunset_local", pa.string()),
  ("day_length_s", pa.int64()),
  ("polar", pa.string()),
])

SUFFIXES = {"jsonl": ".jsonl", "parquet": ".parquet"}


def _validated(rows_iter: Iterable[dict]) -> List[dict]:
  return [AlmanacRow(**r).model_dump() for r in rows_iter]


def write_jsonl(rows_iter: Iterable[dict], path: str) -> int:
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  rows = _validated(rows_iter)
  with open(path, "w", encoding="utf-8") as f:
    for r in rows:
      f.write(json.dumps(r, ensure_ascii=False) + "\n")
  return len(rows)


def write_parquet(rows_iter: Iterable[dict], path: str) -> int:
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  rows = _validated(rows_iter)
  if not rows:
    return 0
  table = pa.Table.from_pylist(rows, schema=ALMANAC_SCHEMA)
  pq.write_table(table, path, compression="snappy")
  return len(rows)


def write_rows(rows_iter: Iterable[dict], path: str, fmt: str) -> int:
  if fmt == "parquet":
    return write_parquet(rows_iter, path)
  if fmt == "jsonl":
    return write_jsonl(rows_iter, path)
  raise ValueError(f"Unknown output format {fmt!r}")
