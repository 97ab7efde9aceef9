"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any

import click

from crossplane_docs.composition_docs import CompositionOptions, generate_composition_documentation
from crossplane_docs.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from crossplane_docs.document_model import (
    DocumentKind,
    ManifestError,
    detect_document_kind,
    load_manifest,
)
from crossplane_docs.output_writing import write_markdown
from crossplane_docs.xrd_docs import XRDGenerationError, XRDOptions, generate_xrd_documentation

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


_output_option = click.option(
    "-o",
    "--output",
    "output_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Output file (default: stdout)",
)
_config_option = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Path to a crossplane-docs YAML configuration file",
)
_manifest_argument = click.argument("manifest_path", type=click.Path(path_type=str))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="crossplane-docs")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Generate terraform-docs style markdown for Crossplane XRDs and Compositions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT, stream=sys.stderr)


@cli.command(name="xrd")
@_manifest_argument
@_output_option
@click.option(
    "--show-nested/--hide-nested",
    "show_nested",
    default=None,
    help="Show nested object structures  [default: show]",
)
@_config_option
def xrd(
    manifest_path: str, output_path: str | None, show_nested: bool | None, config_path: str | None
) -> None:
    """Generate documentation from an XRD (CompositeResourceDefinition) file."""
    configuration = _load_configuration(config_path)
    manifest = _load_manifest(manifest_path)
    options = _xrd_options(configuration, show_nested)
    _emit(_render(generate_xrd_documentation, manifest, options), output_path)


@cli.command(name="composition")
@_manifest_argument
@_output_option
@click.option(
    "--show-patches/--hide-patches",
    "show_patches",
    default=None,
    help="Show patch details and transformations  [default: show]",
)
@_config_option
def composition(
    manifest_path: str, output_path: str | None, show_patches: bool | None, config_path: str | None
) -> None:
    """Generate documentation from a Composition file.

    Shows which managed resources are created and how composite fields are
    patched onto them.
    """
    configuration = _load_configuration(config_path)
    manifest = _load_manifest(manifest_path)
    options = _composition_options(configuration, show_patches)
    _emit(_render(generate_composition_documentation, manifest, options), output_path)


@cli.command(name="generate")
@_manifest_argument
@_output_option
@_config_option
def generate(manifest_path: str, output_path: str | None, config_path: str | None) -> None:
    """Generate documentation for an XRD or Composition, detected from its kind."""
    configuration = _load_configuration(config_path)
    manifest = _load_manifest(manifest_path)
    try:
        kind = detect_document_kind(manifest)
    except ManifestError as exc:
        raise CliError(str(exc)) from exc

    if kind is DocumentKind.XRD:
        markdown = _render(
            generate_xrd_documentation, manifest, _xrd_options(configuration, None)
        )
    else:
        markdown = _render(
            generate_composition_documentation,
            manifest,
            _composition_options(configuration, None),
        )
    _emit(markdown, output_path)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration file with the default settings and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _load_configuration(config_path: str | None) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _load_manifest(manifest_path: str) -> Mapping[str, Any]:
    try:
        return load_manifest(manifest_path)
    except ManifestError as exc:
        raise CliError(str(exc)) from exc


def _xrd_options(configuration: Configuration, show_nested: bool | None) -> XRDOptions:
    return XRDOptions(
        show_nested=configuration.xrd.show_nested if show_nested is None else show_nested
    )


def _composition_options(
    configuration: Configuration, show_patches: bool | None
) -> CompositionOptions:
    return CompositionOptions(
        show_patches=(
            configuration.composition.show_patches if show_patches is None else show_patches
        )
    )


def _render(
    generator: Callable[[Mapping[str, Any], Any], str],
    manifest: Mapping[str, Any],
    options: XRDOptions | CompositionOptions,
) -> str:
    try:
        return generator(manifest, options)
    except XRDGenerationError as exc:
        raise CliError(f"failed to generate documentation: {exc}") from exc


def _emit(markdown: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(markdown, nl=False)
        return
    try:
        resolved_output = write_markdown(markdown, output_path)
    except OSError as exc:
        raise CliError(f"failed to write output file: {exc}") from exc
    click.echo(f"Documentation generated successfully: {resolved_output}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="crossplane-docs", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
