"""Veto CLI — check text, profiles and multi-field payloads from a shell."""

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from veto import __version__

console = Console()


def _build_engine(config_path: str | None):
    from veto.config import ModerationConfig, load_config
    from veto.errors import ConfigError
    from veto.moderation.engine import ModerationEngine

    try:
        config = load_config(config_path) if config_path else ModerationConfig.from_env()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    return ModerationEngine.from_config(config)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log moderation decisions")
def main(verbose: bool):
    """Veto — multi-layer content moderation.

    Runs profanity, spam, toxicity and personal-information checks over
    user text and reports whether it would be approved.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.option("--profanity/--no-profanity", default=True, help="Dictionary profanity check")
@click.option("--spam/--no-spam", default=True, help="Spam heuristics")
@click.option("--toxicity/--no-toxicity", default=True, help="Hate speech / harassment heuristics")
@click.option("--pii/--no-pii", default=True, help="Personal information probes")
@click.option("--auto-clean", is_flag=True, help="Censor profanity instead of rejecting")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--config", "-c", "config_path", default=None, help="YAML config file")
def check(
    text: str,
    profanity: bool,
    spam: bool,
    toxicity: bool,
    pii: bool,
    auto_clean: bool,
    as_json: bool,
    config_path: str | None,
):
    """Moderate a single piece of TEXT."""
    from veto.moderation.models import ModerationOptions

    engine = _build_engine(config_path)
    result = engine.moderate_text(
        text,
        ModerationOptions(
            check_profanity=profanity,
            check_spam=spam,
            check_toxicity=toxicity,
            check_personal_info=pii,
            auto_clean=auto_clean,
        ),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        table = Table(title="Moderation Result")
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        status = "[green]approved[/]" if result.approved else "[red]rejected[/]"
        table.add_row("Decision", status)
        table.add_row("Reason", escape(result.reason or "-"))
        table.add_row("Flags", ", ".join(f.value for f in result.flags) or "-")
        table.add_row("Confidence", f"{result.confidence:.2f}")
        if result.pii_types:
            table.add_row("PII", ", ".join(result.pii_types))
        if result.cleaned_text is not None:
            table.add_row("Cleaned", escape(result.cleaned_text))

        console.print(table)

    if not result.approved:
        sys.exit(1)


# ── Profile ──────────────────────────────────────────────────────────


@main.command()
@click.option("--name", default=None, help="Display name")
@click.option("--bio", default=None, help="Profile bio")
@click.option("--website", default=None, help="Website URL")
@click.option("--config", "-c", "config_path", default=None, help="YAML config file")
def profile(name: str | None, bio: str | None, website: str | None, config_path: str | None):
    """Moderate a profile update (every field is checked)."""
    engine = _build_engine(config_path)
    result = engine.moderate_profile(name=name, bio=bio, website=website)

    if result.approved:
        console.print("  [green]v[/] Profile approved")
        return

    console.print("[red]Profile rejected:[/]")
    for issue in result.issues:
        console.print(f"  [red]x[/] {escape(issue)}")
    sys.exit(1)


# ── Fields ───────────────────────────────────────────────────────────


@main.command()
@click.argument("pairs", nargs=-1, required=True)
@click.option("--auto-clean", is_flag=True, help="Censor profanity instead of rejecting")
@click.option("--config", "-c", "config_path", default=None, help="YAML config file")
def fields(pairs: tuple, auto_clean: bool, config_path: str | None):
    """Moderate FIELD=VALUE pairs in order, stopping at the first rejection."""
    ordered = []
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected FIELD=VALUE, got {pair!r}", param_hint="PAIRS")
        ordered.append((name, value))

    engine = _build_engine(config_path)
    result = engine.moderate_fields(ordered, auto_clean=auto_clean)

    if not result.approved:
        console.print(f"  [red]x[/] {escape(result.reason or '')}")
        sys.exit(1)

    for name, value in result.fields.items():
        console.print(f"  [green]v[/] [cyan]{escape(name)}[/] {escape(value)}")


if __name__ == "__main__":
    main()
