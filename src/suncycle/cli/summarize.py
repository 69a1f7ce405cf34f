import click

from ..io.manifest import read_manifest


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = read_manifest(manifest)
  locations = m.get("locations", {})
  rows = sorted(locations.items())
  width = max([len(k) for k, _ in rows] + [8])
  click.echo("Location".ljust(width) + " | Shortest (h) | Longest (h) | Mean (h) | Polar days/nights")
  click.echo("-" * width + "-|--------------|-------------|----------|------------------")
  for name, s in rows:
    click.echo(
      name.ljust(width)
      + f" | {s.get('min_day_length_h', 0):12.2f} | {s.get('max_day_length_h', 0):11.2f}"
      + f" | {s.get('mean_day_length_h', 0):8.2f} | {s.get('polar_day_count', 0)}/{s.get('polar_night_count', 0)}"
    )
  click.echo(f"Year: {m.get('year')}, zenith: {m.get('zenith')}")
  if not m["hash_ok"]:
    click.echo("WARNING: dataset hash does not match manifest contents", err=True)


if __name__ == "__main__":
  main()
