"""CLI entry point for namefit."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from tqdm import tqdm

# Load .env before Click parses envvar options (e.g. NAMEFIT_CONFIG)
load_dotenv()

from namefit import __version__
from namefit.config import load_config
from namefit.errors import ConfigError, NamefitError, RenameError, SameFileError
from namefit.rename import move_file
from namefit.shorten import new_filename

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


@click.command()
@click.version_option(version=__version__, prog_name="namefit")
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option("--dst-dir", "-d", type=click.Path(file_okay=False), default=None,
              help="Move files into this directory instead of renaming in place")
@click.option("--show-only", "-s", is_flag=True, default=False,
              help="Only print the new filename, do not rename")
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False),
              default=None, envvar="NAMEFIT_CONFIG",
              help="Path to YAML config file (also: NAMEFIT_CONFIG env var)")
@click.option("--max-retries", type=click.IntRange(min=1), default=None,
              help="Give up after this many numbered candidates")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Verbose logging")
def main(paths, dst_dir, show_only, config_file, max_retries, verbose):
    """Shorten filenames longer than 255 bytes, keeping their meaningful tags."""
    _setup_logging(verbose)

    try:
        config = load_config(config_file)
    except (ConfigError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if max_retries is not None:
        config.max_retries = max_retries

    failures = 0
    progress = not show_only and len(paths) > 1
    for raw_path in tqdm(paths, desc="Renaming", unit="file", disable=not progress):
        path = Path(raw_path)
        try:
            name = new_filename(path, dst_dir, config)
        except NamefitError as e:
            click.echo(f"Error: {e}", err=True)
            failures += 1
            continue

        if show_only:
            click.echo(name)
            continue

        target_dir = Path(dst_dir) if dst_dir is not None else path.parent
        try:
            new_path = move_file(path, target_dir, name)
        except SameFileError:
            logger.info("Already fits, nothing to do: %s", path)
            continue
        except RenameError as e:
            click.echo(f"Error: {e}", err=True)
            failures += 1
            continue
        logger.info("Renamed: %s -> %s", path.name, new_path.name)

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
