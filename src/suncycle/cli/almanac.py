import logging
from pathlib import Path

import click
from pydantic import ValidationError

from ..io.manifest import write_manifest
from ..io.writers import SUFFIXES, write_rows
from ..model.locations import load_config
from ..tables.almanac import almanac_rows, day_length_stats

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", required=True, type=click.Path(exists=True))
def main(config):
  logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  )
  try:
    cfg = load_config(config)
  except ValidationError as e:
    click.echo(f"ERROR: invalid config: {e}", err=True)
    raise SystemExit(1)
  out_dir = Path(cfg.output.path) / f"{cfg.year:04d}"
  suffix = SUFFIXES[cfg.output.format]
  meta = {
    "year": cfg.year,
    "zenith": cfg.zenith.name.lower(),
    "format": cfg.output.format,
    "locations": {},
  }
  for loc in cfg.locations:
    rows = almanac_rows(loc, cfg.year, cfg.zenith)
    path = out_dir / f"{loc.name}{suffix}"
    n = write_rows(rows, str(path), cfg.output.format)
    logger.info(f"Wrote {n} rows for {loc.name} to {path}")
    meta["locations"][loc.name] = {"rows": n, "file": path.name, **day_length_stats(rows)}
  write_manifest(str(out_dir / "manifest.json"), meta)
  click.echo(f"Done. Wrote almanac for {len(cfg.locations)} location(s) to {out_dir}")


if __name__ == "__main__":
  main()
