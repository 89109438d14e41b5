"""CLI entry points: chatnorm parse, chatnorm detect, chatnorm canonical, chatnorm example, chatnorm formats, chatnorm demo."""

from __future__ import annotations

import json
import logging
from typing import TextIO

import click

from .config import LOG_LEVELS, Config

DEMO_TRANSCRIPTS = [
    ("iMessage", "John\n10:30 AM\nHey there\n\nSarah\n10:31 AM\nHi John!"),
    ("Discord", "[10:30 AM] John: Hey there\n[10:31 AM] Sarah: Hi John!"),
    ("WhatsApp", "10:30 AM - John: Hey there\n10:31 AM - Sarah: Hi John!"),
    ("Slack", "John 10:30 AM\nHey there\n\nSarah 10:31 AM\nHi John!"),
]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity (default: $CHATNORM_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """chat-normalizer: turn chat exports of any format into clean messages."""
    ctx.ensure_object(dict)
    try:
        config = Config()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    if log_level:
        config.log_level = log_level.upper()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj["config"] = config


@cli.command()
@click.argument("transcript", type=click.File("r"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Output messages as JSON")
@click.option("--canonical", is_flag=True, help="Output messages as [time] user: content lines")
@click.option("--strict-lines", is_flag=True, help="Classify each line in isolation (multi-line headers never match)")
@click.pass_context
def parse(ctx: click.Context, transcript: TextIO, as_json: bool, canonical: bool, strict_lines: bool) -> None:
    """Parse a transcript (file or stdin) into messages."""
    from .canonical import to_canonical
    from .parser import parse as parse_text

    config = ctx.obj["config"]
    if strict_lines:
        config.line_mode = "lines"

    messages = parse_text(transcript.read(), config)

    if as_json:
        click.echo(json.dumps([m.to_dict() for m in messages], indent=2))
    elif canonical:
        if messages:
            click.echo(to_canonical(messages))
    elif messages:
        for i, msg in enumerate(messages, start=1):
            click.echo(f"{i:>4}  [{msg.format}] {msg.time} {msg.user}: {msg.content}")
    else:
        click.echo("No messages found (unsupported format?)", err=True)


@cli.command()
@click.argument("transcript", type=click.File("r"), default="-")
@click.pass_context
def detect(ctx: click.Context, transcript: TextIO) -> None:
    """Report which format the start of a transcript looks like."""
    from .parser import detect_format

    click.echo(detect_format(transcript.read(), ctx.obj["config"]))


@cli.command()
@click.argument("transcript", type=click.File("r"), default="-")
@click.pass_context
def canonical(ctx: click.Context, transcript: TextIO) -> None:
    """Rewrite a transcript in the canonical [time] user: content form."""
    from .canonical import to_canonical
    from .parser import parse as parse_text

    messages = parse_text(transcript.read(), ctx.obj["config"])
    if messages:
        click.echo(to_canonical(messages))


@cli.command()
@click.argument("tag")
def example(tag: str) -> None:
    """Print the sample transcript for a format tag."""
    from .rules import example_for, format_tags, get_rule

    if get_rule(tag) is None:
        raise click.BadParameter(
            f"{tag!r}. Use one of: {', '.join(format_tags())}", param_hint="TAG"
        )
    click.echo(example_for(tag))


@cli.command()
def formats() -> None:
    """List known formats in match priority order."""
    from .rules import RULES, example_for

    for rank, rule in enumerate(RULES, start=1):
        kind = f"{rule.span}-line header" if rule.multiline else "single line"
        click.echo(f"{rank}. {rule.name} ({kind})")
        for line in example_for(rule.name).splitlines():
            click.echo(f"     {line}")


@cli.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Run the built-in sample transcripts through the parser."""
    from .parser import detect_format, parse as parse_text

    config = ctx.obj["config"]
    for name, text in DEMO_TRANSCRIPTS:
        click.echo(f"\n{name} format (detected: {detect_format(text, config)}):")
        for msg in parse_text(text, config):
            click.echo(f"  [{msg.time}] {msg.user}: {msg.content}")
