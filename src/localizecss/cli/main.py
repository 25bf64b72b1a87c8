"""localizecss CLI entry point."""
from __future__ import annotations

import logging
import sys

import click

from localizecss import __version__
from localizecss.config import LocalizeConfig
from localizecss.errors import DirectoryListingError
from localizecss.runner import LocalizeRunner

logger = logging.getLogger("localizecss")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="localizecss")
@click.argument("src", default="./localize", required=False)
@click.argument("dest", default="./docs/localize", required=False)
@click.option(
    "-i",
    "--ignore",
    "skip_lines",
    default=0,
    type=int,
    help="Ignore the first N lines of every CSV.",
)
@click.option(
    "-d",
    "--default",
    "default_language",
    default="",
    help="Default language. Enables the missing-translation check.",
)
@click.option("--dry-run", is_flag=True, help="Render stylesheets without writing them.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(
    src: str,
    dest: str,
    skip_lines: int,
    default_language: str,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Compile CSV translation tables in SRC into CSS stylesheets in DEST.

    Each SRC/<lang>.csv row is ``selector,word[,extra-css]`` and becomes a
    ``content:"word"`` rule in DEST/<lang>.css, scoped under
    ``body[lang="<lang>"]`` unless <lang> is the default language.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = LocalizeConfig(
        skip_lines=skip_lines,
        default_language=default_language,
        source_dir=src,
        dest_dir=dest,
        dry_run=dry_run,
    )
    logger.debug("Configuration: %s", config)

    runner = LocalizeRunner(config)
    try:
        runner.load()
    except DirectoryListingError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    results = runner.generate()

    if dry_run:
        for result in results:
            click.echo(f"/* {result.output_path} */")
            click.echo(result.css)
        return

    written = [r for r in results if r.written]
    rules = sum(r.rule_count for r in written)
    failed = [r.language for r in results if r.failed]
    click.echo(f"Generated {len(written)} stylesheet(s) with {rules} rule(s) in {dest}")
    if failed:
        click.echo(f"Failed: {', '.join(failed)}", err=True)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
