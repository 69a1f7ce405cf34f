from datetime import datetime, timezone

from fastapi.testclient import TestClient

from suncycle.api import SunRestAPI
from suncycle.runtime.clock import SimulationClock


def client():
  clock = SimulationClock(start_time=datetime(2017, 2, 9, 12, tzinfo=timezone.utc))
  return TestClient(SunRestAPI(clock=clock).app)


def test_discovery_and_health():
  c = client()
  assert c.get("/api/").json()["zeniths"]["civil"] == 96.0
  health = c.get("/health").json()
  assert health["status"] == "ok"
  assert health["time"].startswith("2017-02-09T12:00:00")


def test_sun_defaults_to_clock():
  r = client().get("/api/sun", params={"latitude": 51.50998, "longitude": -0.1337})
  assert r.status_code == 200
  body = r.json()
  assert body["cycle"] == "day"
  assert abs(body["events"]["official"]["sunset_epoch"] - 1486659846) <= 300


def test_sun_polar_night():
  r = client().get("/api/sun", params={
    "latitude": 78.2186, "longitude": 15.64007, "at": "2017-02-09T12:00:00Z",
  })
  assert r.status_code == 200
  body = r.json()
  assert body["events"]["official"]["sunrise"] is None
  assert body["cycle"] == "night"


def test_sun_rejects_bad_input():
  c = client()
  assert c.get("/api/sun", params={"latitude": 100, "longitude": 0}).status_code == 400
  assert c.get("/api/sun", params={"latitude": 0, "longitude": 0, "zenith": "golden"}).status_code == 400
  assert c.get("/api/sun", params={"latitude": 0, "longitude": 0, "tz": "Not/AZone"}).status_code == 400
  assert c.get("/api/sun", params={"latitude": 0, "longitude": 0, "tz": "+3600"}).status_code == 400
