import hashlib
import json
import os
from pathlib import Path

SCHEMA_VERSION = "1.0.0"


def dataset_hash(meta: dict) -> str:
  s = json.dumps(meta, sort_keys=True).encode()
  return hashlib.sha256(s).hexdigest()[:16]


def write_manifest(path: str, meta: dict) -> dict:
  """
  Stamp the manifest with schema version and a content hash, then write it.
  The hash covers everything except itself.
  """
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  body = {k: v for k, v in meta.items() if k != "dataset_hash"}
  body.setdefault("schema_version", SCHEMA_VERSION)
  body["dataset_hash"] = dataset_hash(body)
  with open(path, "w", encoding="utf-8") as f:
    json.dump(body, f, indent=2)
  return body


def read_manifest(path) -> dict:
  meta = json.loads(Path(path).read_text(encoding="utf-8"))
  expected = meta.get("dataset_hash")
  body = {k: v for k, v in meta.items() if k != "dataset_hash"}
  meta["hash_ok"] = expected is not None and expected == dataset_hash(body)
  return meta
