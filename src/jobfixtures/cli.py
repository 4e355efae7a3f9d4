"""Typer CLI entrypoint for jobfixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml

from jobfixtures.classes import ReferenceClass
from jobfixtures.config import AppSettings, SettingsConfiguration, load_settings
from jobfixtures.content import verify_input_file
from jobfixtures.errors import ClassNotFoundOnDiskError, FixtureError
from jobfixtures.factory import FixtureFactory
from jobfixtures.logging_utils import configure_logging
from jobfixtures.utils.paths import ensure_directories

app = typer.Typer(
    add_completion=False,
    help="jobfixtures command line interface.",
    no_args_is_help=True,
)

CONFIG_FILE_OPTION = typer.Option(
    None,
    "--config-file",
    help="Optional settings YAML path.",
    exists=False,
    file_okay=True,
    dir_okay=False,
    readable=True,
)


def _load_and_optionally_configure_logger(
    config_file: Path | None,
    configure: bool,
) -> tuple[AppSettings, logging.Logger]:
    settings = load_settings(config_file=config_file)
    if configure:
        logger = configure_logging(settings.paths.logs_root, settings.logging)
    else:
        logger = logging.getLogger("jobfixtures")
    return settings, logger


def _build_factory(
    settings: AppSettings,
    logger: logging.Logger,
    reference: ReferenceClass | None = None,
) -> FixtureFactory:
    return FixtureFactory(
        SettingsConfiguration(settings),
        reference or ReferenceClass(package="", class_dir=Path.cwd()),
        logger=logger,
    )


def _resolve_reference(class_dir: Path | None, output_root: Path | None, package: str) -> ReferenceClass:
    if (class_dir is None) == (output_root is None):
        raise typer.BadParameter("Provide exactly one of --class-dir or --output-root.")
    if output_root is not None:
        return ReferenceClass.from_output_root(output_root, package)
    return ReferenceClass(package=package, class_dir=class_dir)


@app.command("show-config")
def show_config(config_file: Path | None = CONFIG_FILE_OPTION) -> None:
    """Print the effective configuration after env overrides."""

    settings, _ = _load_and_optionally_configure_logger(config_file, configure=False)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


@app.command("init-scratch")
def init_scratch(config_file: Path | None = CONFIG_FILE_OPTION) -> None:
    """Create the configured scratch and log directories."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    factory = _build_factory(settings, logger)
    created_dirs = ensure_directories([Path(factory.get_temp_dir()), settings.paths.logs_root])
    logger.info("init_scratch.created_dirs count=%s", len(created_dirs))
    typer.echo(f"scratch_dir: {factory.get_temp_dir()}")


@app.command("random-name")
def random_name(
    count: int = typer.Option(
        1,
        "--count",
        min=1,
        help="Number of names to print.",
    ),
    config_file: Path | None = CONFIG_FILE_OPTION,
) -> None:
    """Print randomly generated fixture filenames."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=False)
    factory = _build_factory(settings, logger)
    for _ in range(count):
        typer.echo(factory.generate_random_filename())


@app.command("input-file")
def input_file(
    limit: int = typer.Option(
        ...,
        "--limit",
        help="Exclusive upper bound of the integer sequence to write.",
    ),
    config_file: Path | None = CONFIG_FILE_OPTION,
) -> None:
    """Write an integer-sequence input file into the scratch directory."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    factory = _build_factory(settings, logger)
    try:
        path = factory.create_input_file(limit)
    except FixtureError as exc:
        raise typer.BadParameter(str(exc), param_hint="--limit") from exc
    typer.echo(f"input_file: {path}")


@app.command("verify-input-file")
def verify_input_file_cmd(
    path: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False, readable=True),
    limit: int = typer.Option(..., "--limit", help="Expected exclusive upper bound."),
    config_file: Path | None = CONFIG_FILE_OPTION,
) -> None:
    """Check that an input file holds exactly the sequence for --limit."""

    _, logger = _load_and_optionally_configure_logger(config_file, configure=False)
    try:
        matches = verify_input_file(path, limit, logger=logger)
    except FixtureError as exc:
        raise typer.BadParameter(str(exc), param_hint="--limit") from exc
    typer.echo(f"matches: {matches}")
    if not matches:
        raise typer.Exit(code=1)


@app.command("jar-file")
def jar_file(
    class_name: str = typer.Argument(..., help="Simple name of the compiled class."),
    package: str = typer.Option(
        "",
        "--package",
        help="Dotted package the class entry is stored under.",
    ),
    class_dir: Path | None = typer.Option(
        None,
        "--class-dir",
        help="Directory holding the compiled .class file.",
        file_okay=False,
        dir_okay=True,
    ),
    output_root: Path | None = typer.Option(
        None,
        "--output-root",
        help="Compiled-output root; the class directory is derived from --package.",
        file_okay=False,
        dir_okay=True,
    ),
    config_file: Path | None = CONFIG_FILE_OPTION,
) -> None:
    """Package one compiled class into <scratch>/<CLASS_NAME>.jar."""

    reference = _resolve_reference(class_dir, output_root, package)
    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    factory = _build_factory(settings, logger, reference)
    try:
        path = factory.create_jar_file(class_name)
    except ClassNotFoundOnDiskError as exc:
        logger.error("jar_file.class_missing class_name=%s path=%s", exc.class_name, exc.class_file)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    except FixtureError as exc:
        raise typer.BadParameter(str(exc), param_hint="CLASS_NAME") from exc
    typer.echo(f"jar_file: {path}")


def main() -> None:
    """CLI script entrypoint."""

    app()


if __name__ == "__main__":
    main()
