from pathlib import Path

import click

from keyscan.core.config import ScanConfig, settings
from keyscan.core.exceptions import KeyscanError, setup_logger
from keyscan.pipeline import resolve_key_file, run_scan
from keyscan.schemas.report import ScanReport

app_logger = setup_logger()


def build_config(**overrides) -> ScanConfig:
    update = {k: v for k, v in overrides.items() if v not in (None, ())}
    if "catalog_files" in update:
        update["catalog_files"] = [str(p) for p in update["catalog_files"]]
    return settings.model_copy(update=update)


def print_report(report: ScanReport):
    if report.markup_files or report.program_files:
        click.echo(
            f"→ Scanned {report.markup_files} markup and {report.program_files} program files."
        )
    click.echo(f"→ Found {report.candidates} translation keys.")
    click.echo(f"  ✔ Resolved: {report.resolved_keys}")
    click.echo(f"  ⚠ Unresolved: {report.unresolved_keys}")
    click.echo(f"✨ Translations were generated: {report.translations_path}, {report.unresolved_path}")


catalog_option = click.option(
    "--catalog",
    "catalog_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Translation JSON document; repeat to merge, later files win.",
)
output_option = click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the generated JSON files.",
)


@click.group()
def i18n():
    """i18n utilities"""


@i18n.command()
@click.option(
    "--source-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Root directory to scan for templates and sources.",
)
@catalog_option
@output_option
@click.option("--strict/--no-strict", default=None, help="Fail on source syntax errors.")
def extract(source_dir, catalog_files, output_dir, strict):
    """Scan templates and sources, then resolve the keys against the catalog"""
    config = build_config(
        source_dir=str(source_dir) if source_dir else None,
        catalog_files=catalog_files,
        output_dir=str(output_dir) if output_dir else None,
        strict_parsing=strict,
    )

    click.echo("🔍 Extracting translation keys from source code…")
    try:
        report = run_scan(config)
    except KeyscanError as e:
        raise click.ClickException(str(e)) from e

    print_report(report)


@i18n.command()
@click.option(
    "--keys",
    "keys_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Newline separated list of keys.",
)
@catalog_option
@output_option
def resolve(keys_path, catalog_files, output_dir):
    """Resolve a list of keys against the catalog without scanning sources"""
    config = build_config(
        catalog_files=catalog_files,
        output_dir=str(output_dir) if output_dir else None,
    )

    try:
        report = resolve_key_file(keys_path, config)
    except KeyscanError as e:
        raise click.ClickException(str(e)) from e

    print_report(report)


cli = click.CommandCollection(sources=[i18n])

if __name__ == "__main__":
    cli()
