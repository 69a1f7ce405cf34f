from datetime import datetime, timezone

import pytest

# 2017-02-09T00:00:00Z, the day the London / Longyearbyen reference values describe
TEST_DAY = datetime.fromtimestamp(1486598400, tz=timezone.utc)

LONDON = (51.50998, -0.1337)
LONGYEARBYEN = (78.2186, 15.64007)
TOKYO = (35.6895, 139.6917)


@pytest.fixture
def london_fixture_file(tmp_path):
  path = tmp_path / "cities.json"
  path.write_text(
    '[{"city": "London", "latitude": 51.50998, "longitude": -0.1337,'
    ' "sunrise": "2017-02-09T07:26:21+0000", "sunset": "2017-02-09T17:04:06+0000"}]',
    encoding="utf-8",
  )
  return path
