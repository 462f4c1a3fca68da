# splash_builder/display.py
import click


def success(text: str):
    click.echo("  ", nl=False)
    click.secho("✓  ", fg="green", nl=False)
    click.echo(text)


def error(text: str):
    click.echo("  ", nl=False)
    click.secho("✗  ", fg="red", nl=False)
    click.echo(text)


def header(text: str):
    click.echo("")
    click.echo(" ", nl=False)
    click.secho(text, fg="cyan", underline=True)
    click.echo("")


def blank():
    click.echo("")
