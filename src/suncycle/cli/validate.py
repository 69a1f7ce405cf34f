import sys
from datetime import datetime, timezone

import click

from ..core.instants import epoch_seconds
from ..io.fixtures import load_city_fixtures
from ..session import create_session

TOLERANCE_S = 300


@click.command()
@click.option("--fixtures", required=True, type=click.Path(exists=True), help="JSON list of city records")
@click.option("--date", "day", required=True, type=click.DateTime(formats=["%Y-%m-%d"]), help="UTC day the fixtures describe")
@click.option("--tolerance", default=TOLERANCE_S, type=int, help="Allowed error in seconds")
def main(fixtures, day, tolerance):
  """Compare computed sunrise/sunset with reference city times."""
  cities = load_city_fixtures(fixtures)
  if not cities:
    click.echo("ERROR: no cities found in fixtures", err=True)
    sys.exit(1)
  instant = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
  failures = 0
  for c in cities:
    session = create_session((c.latitude, c.longitude), instant=instant)
    for label, expected, actual in (("sunrise", c.sunrise, session.sunrise()), ("sunset", c.sunset, session.sunset())):
      if actual is None:
        click.echo(f"FAIL {c.city} {label}: no event computed")
        failures += 1
        continue
      diff = epoch_seconds(actual) - epoch_seconds(expected)
      if abs(diff) > tolerance:
        click.echo(f"FAIL {c.city} {label}: {actual.isoformat()} vs {expected.isoformat()} ({diff:+d}s)")
        failures += 1
  checked = 2 * len(cities)
  click.echo(f"Checked {checked} events for {len(cities)} cities, {failures} outside {tolerance}s")
  if failures:
    sys.exit(1)
  click.echo("Validation OK")


if __name__ == "__main__":
  main()
