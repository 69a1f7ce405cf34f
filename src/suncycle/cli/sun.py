import json
import sys
from datetime import datetime

import click

from ..core.solar import Zenith
from ..model.coordinate import InvalidCoordinate
from ..session import create_session


@click.command()
@click.option("--lat", "latitude", required=True, type=float, help="Latitude in degrees, -90..90")
@click.option("--lng", "longitude", required=True, type=float, help="Longitude in degrees, -180..180")
@click.option("--at", "at", type=str, help="Instant (ISO 8601); default: now")
@click.option("--zenith", default="official", type=click.Choice([z.name.lower() for z in Zenith]))
@click.option("--tz", type=str, help="IANA zone, UTC offset (+05:30) or seconds east of UTC")
@click.option("--json", "as_json", is_flag=True, help="Print the full summary as JSON")
def main(latitude, longitude, at, zenith, tz, as_json):
  instant = None
  if at:
    try:
      instant = datetime.fromisoformat(at.replace("Z", "+00:00"))
    except ValueError as e:
      click.echo(f"ERROR: bad --at value: {e}", err=True)
      sys.exit(2)
  try:
    session = create_session((latitude, longitude), instant=instant, zenith=zenith, offset_resolver=tz)
  except InvalidCoordinate as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)
  except ValueError as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(2)
  if as_json:
    click.echo(json.dumps(session.to_dict(), indent=2))
    return
  sunrise, sunset = session.sunrise(), session.sunset()
  click.echo(f"Sunrise: {sunrise.isoformat() if sunrise else 'none'}")
  click.echo(f"Sunset:  {sunset.isoformat() if sunset else 'none'}")
  click.echo(f"Now:     {session.cycle().value}")


if __name__ == "__main__":
  main()
