import json
import logging
from pathlib import Path

import anyio
import click
from rich.console import Console
from rich.logging import RichHandler

from next_compat.classifier import build_report
from next_compat.constants import DEFAULT_DIST_DIRNAME
from next_compat.errors import NextCompatError
from next_compat.paths import clean_escaped_chars, path_has_regex
from next_compat.tui import ReportConsoleUI


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """Check Next.js routing config against Firebase Hosting."""


@cli.command(help="Classify a built Next.js project for Firebase Hosting.")
@click.argument(
    "project",
    required=False,
    default=".",
    type=click.Path(path_type=Path, file_okay=False),
)
@click.option(
    "--dist-dir",
    default=DEFAULT_DIST_DIRNAME,
    show_default=True,
    help="Build output directory, relative to PROJECT.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.option("--strict", is_flag=True, help="Exit 1 when any rule is unsupported.")
@click.option("-v", "--verbose", is_flag=True, help="Show every rule and debug logs.")
def check(project: Path, dist_dir: str, as_json: bool, strict: bool, verbose: bool) -> None:
    _configure_logging(verbose)
    try:
        report = anyio.run(build_report, project, dist_dir)
    except NextCompatError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    if as_json:
        click.echo(json.dumps(report.as_dict(), indent=2))
    else:
        ReportConsoleUI(Console()).render_report(
            report,
            project=str(project.expanduser().resolve()),
            dist_dir=dist_dir,
            verbose=verbose,
        )

    if strict and report.routes.unsupported:
        raise click.exceptions.Exit(1)


@cli.command(help="Show how path patterns are classified and cleaned.")
@click.argument("patterns", nargs=-1, required=True)
def paths(patterns: tuple[str, ...]) -> None:
    rows = [
        (pattern, path_has_regex(pattern), clean_escaped_chars(pattern))
        for pattern in patterns
    ]
    ReportConsoleUI(Console()).render_paths(rows)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
