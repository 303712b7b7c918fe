"""CLI entry point for azure-paste-parser."""

import logging
from pathlib import Path

import click

from azure_paste_parser.messages.loader import localized_message
from azure_paste_parser.parser.endpoint import parse
from azure_paste_parser.settings.config import ConfigError, load_config, save_config
from azure_paste_parser.settings.merge import apply_pasted_text


def _read_text(text: str | None) -> str:
    """Use the TEXT argument, or read stdin when it is omitted or '-'."""
    if text is None or text == "-":
        return click.get_text_stream("stdin").read()
    return text


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Azure Paste Parser: pull Azure OpenAI settings out of pasted URLs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("parse")
@click.argument("text", required=False)
def parse_cmd(text: str | None):
    """Parse TEXT (or stdin) and print the result as JSON."""
    result = parse(_read_text(text))
    click.echo(result.model_dump_json(indent=2))


@main.command()
@click.argument("text", required=False)
@click.option("-c", "--config", "config_path", required=True, type=click.Path(dir_okay=False, path_type=Path), help="YAML config file to update.")
@click.option("--lang", default="en", help="Language for the feedback message (en, nl).")
@click.option("--force", is_flag=True, help="Parse even if the input looks like a plain hostname.")
def apply(text: str | None, config_path: Path, lang: str, force: bool):
    """Parse TEXT (or stdin) and merge the result into a config file."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    updated, feedback = apply_pasted_text(config, _read_text(text), force=force)
    if feedback is None:
        click.echo("Input does not look like a pasted Azure URL; nothing to do. Use --force to parse anyway.")
        return

    if updated != config:
        save_config(updated, config_path)
        click.echo(f"Updated {config_path}")

    message = localized_message(feedback.key, lang)
    click.echo(f"Warning: {message}" if feedback.is_warning else message)
