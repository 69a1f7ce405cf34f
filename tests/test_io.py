import json

import pyarrow.parquet as pq
import pytest
from pydantic import ValidationError

from suncycle.io.fixtures import load_city_fixtures
from suncycle.io.manifest import read_manifest, write_manifest
from suncycle.io.schema import AlmanacRow
from suncycle.io.writers import write_rows
from suncycle.model.locations import LocationConfig, load_config
from suncycle.tables.almanac import almanac_rows

from conftest import LONDON


def _rows():
  loc = LocationConfig(name="london", latitude=LONDON[0], longitude=LONDON[1])
  return almanac_rows(loc, 2025)[:10]


def test_load_city_fixtures(london_fixture_file):
  cities = load_city_fixtures(london_fixture_file)
  assert len(cities) == 1
  assert cities[0].city == "London"
  assert int(cities[0].sunrise.timestamp()) == 1486625181
  assert int(cities[0].sunset.timestamp()) == 1486659846


def test_fixture_without_offset_rejected(tmp_path):
  path = tmp_path / "bad.json"
  path.write_text('[{"city": "X", "latitude": 0, "longitude": 0,'
                  ' "sunrise": "2017-02-09T07:26:21", "sunset": "2017-02-09T17:04:06"}]')
  with pytest.raises(ValueError):
    load_city_fixtures(path)


def test_write_jsonl_and_parquet(tmp_path):
  rows = _rows()
  n = write_rows(rows, str(tmp_path / "a" / "london.jsonl"), "jsonl")
  assert n == 10
  lines = (tmp_path / "a" / "london.jsonl").read_text(encoding="utf-8").splitlines()
  assert json.loads(lines[0])["date"] == "2025-01-01"

  n = write_rows(rows, str(tmp_path / "b" / "london.parquet"), "parquet")
  table = pq.read_table(tmp_path / "b" / "london.parquet")
  assert table.num_rows == n == 10
  assert "sunrise_epoch" in table.column_names

  with pytest.raises(ValueError):
    write_rows(rows, str(tmp_path / "c.csv"), "csv")


def test_row_schema_rejects_missing_fields():
  with pytest.raises(ValidationError):
    AlmanacRow(location="x", date="2025-01-01")


def test_manifest_hash_roundtrip(tmp_path):
  path = tmp_path / "manifest.json"
  written = write_manifest(str(path), {"year": 2025, "locations": {}})
  assert written["schema_version"] == "1.0.0"
  assert read_manifest(path)["hash_ok"] is True

  tampered = json.loads(path.read_text())
  tampered["year"] = 2024
  path.write_text(json.dumps(tampered))
  assert read_manifest(path)["hash_ok"] is False


def test_load_config(tmp_path):
  path = tmp_path / "cfg.yaml"
  path.write_text(
    "year: 2024\nzenith: civil\noutput:\n  format: parquet\n"
    "locations:\n  - name: london\n    latitude: 51.5\n    longitude: -0.13\n",
    encoding="utf-8",
  )
  cfg = load_config(path)
  assert cfg.year == 2024
  assert cfg.zenith.name == "CIVIL"
  assert cfg.output.format == "parquet"
  assert cfg.locations[0].coordinate.latitude == 51.5


def test_load_config_rejects_bad_values(tmp_path):
  path = tmp_path / "cfg.yaml"
  path.write_text("locations:\n  - name: nowhere\n    latitude: 95\n    longitude: 0\n", encoding="utf-8")
  with pytest.raises(ValidationError):
    load_config(path)
